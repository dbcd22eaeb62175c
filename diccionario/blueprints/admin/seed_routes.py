import logging

from flask import current_app, request

from ...extensions import limiter
from ...seeders import dictionary_status
from ...services.dictionary_seed import get_seed_coordinator
from ...utils.admin_auth import require_admin_token
from ...utils.api_responses import APIResponse, api_route
from . import admin_api_bp

logger = logging.getLogger(__name__)

_FALSE_VALUES = {'0', 'false', 'no', 'off'}


def _seed_rate_limit():
    return current_app.config.get('ADMIN_SEED_RATE_LIMIT') or '10 per minute'


def _force_flag(payload):
    if 'force' in request.args:
        return request.args['force'].strip().lower() not in _FALSE_VALUES
    value = payload.get('force', True)
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_VALUES
    return bool(value)


@admin_api_bp.route('/seed', methods=['POST'])
@limiter.limit(_seed_rate_limit)
@require_admin_token
@api_route
def trigger_seed():
    """Run one dictionary seeding batch and report how many terms were added"""
    payload = APIResponse.handle_request_content()
    force = _force_flag(payload)
    coordinator = get_seed_coordinator()

    before = coordinator.repository.count_terms()
    result = coordinator.ensure_seeded(force)
    after = coordinator.repository.count_terms()

    logger.info("Admin seed finished: before=%s after=%s force=%s", before, after, force)
    message = "Dictionary already seeded" if result is None else "Dictionary seed batch finished"
    return APIResponse.success(
        {
            'before': before,
            'after': after,
            'added': after - before,
            'result': result.to_dict() if result is not None else None,
        },
        message=message,
    )


@admin_api_bp.route('/seed/status', methods=['GET'])
@require_admin_token
@api_route
def seed_status():
    """Report expected, stored and missing term counts"""
    return APIResponse.success(dictionary_status())
