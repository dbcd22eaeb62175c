import hmac
import logging
from functools import wraps

from flask import current_app, request

from .api_responses import APIResponse

logger = logging.getLogger(__name__)


def _bearer_token():
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer':
        return None
    return token.strip() or None


def require_admin_token(f):
    """
    Decorator requiring ``Authorization: Bearer <ADMIN_TOKEN>``.
    An unset ADMIN_TOKEN rejects every call.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        expected = current_app.config.get('ADMIN_TOKEN')
        supplied = _bearer_token()
        if not expected or not supplied or not hmac.compare_digest(supplied.encode(), expected.encode()):
            logger.warning("Rejected admin request to %s", request.path)
            return APIResponse.unauthorized()
        return f(*args, **kwargs)

    return decorated_function
