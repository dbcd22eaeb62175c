from functools import wraps

from flask import jsonify, request, Response
from typing import Any, Dict, Optional, List

from ..services.dictionary_seed.errors import MalformedCatalogEntry, PersistenceFailure


class APIResponse:
    """Standardized API response handler"""

    @staticmethod
    def success(data: Any = None, message: str = "Success", status_code: int = 200) -> Response:
        """Standard success response"""
        response_data = {
            'success': True,
            'message': message,
            'data': data
        }
        return jsonify(response_data), status_code

    @staticmethod
    def error(message: str, errors: Optional[Dict] = None, status_code: int = 400) -> Response:
        """Standard error response"""
        response_data = {
            'success': False,
            'message': message,
            'errors': errors or {}
        }
        return jsonify(response_data), status_code

    @staticmethod
    def validation_error(errors: Dict[str, List[str]]) -> Response:
        return APIResponse.error(
            message="Validation failed",
            errors=errors,
            status_code=422
        )

    @staticmethod
    def unauthorized(message: str = "Authentication required") -> Response:
        return APIResponse.error(message=message, status_code=401)

    @staticmethod
    def unavailable(message: str = "Service temporarily unavailable") -> Response:
        return APIResponse.error(message=message, status_code=503)

    @staticmethod
    def handle_request_content():
        """Smart request content handling"""
        if request.is_json:
            return request.get_json(silent=True) or {}
        elif request.form:
            return request.form.to_dict()
        else:
            return {}


def api_route(func):
    """Decorator for API routes with consistent error handling"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except MalformedCatalogEntry as e:
            return APIResponse.validation_error({'catalog': [str(e)]})
        except PersistenceFailure as e:
            from flask import current_app
            current_app.logger.error("Persistence failure in %s: %s", func.__name__, e)
            return APIResponse.unavailable("Database temporarily unavailable")
        except Exception as e:
            from flask import current_app
            current_app.logger.exception("API error in %s: %s", func.__name__, e)
            return APIResponse.error("Internal server error", status_code=500)

    return wrapper


__all__ = ['APIResponse', 'api_route']
