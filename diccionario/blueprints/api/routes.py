import logging

from flask import jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ...extensions import db, limiter
from ...utils.timezone_utils import TimezoneUtils
from . import api_bp

logger = logging.getLogger(__name__)


@api_bp.route('/health', methods=['GET'])
@limiter.exempt
def health_check():
    """Health check endpoint for monitoring services"""
    timestamp = TimezoneUtils.isoformat(TimezoneUtils.utc_now())
    try:
        db.session.execute(text('SELECT 1'))
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.error("Health check database query failed: %s", exc)
        return jsonify({'status': 'degraded', 'db': 'down', 'timestamp': timestamp}), 503
    return jsonify({'status': 'ok', 'db': 'up', 'timestamp': timestamp})
