"""Shared API utilities: auth decorator, error helpers, request parsing."""
import logging
from functools import wraps

from flask import jsonify, request
from flask_login import current_user

from showroom.core.errors import ShowroomError

logger = logging.getLogger('showroom.api')


# ============== Decorators ==============

def admin_token_required(f):
    """Require a valid admin bearer token; JSON 401 instead of a redirect."""
    @wraps(f)
    def decorated(*args, **kwargs):
        if not current_user.is_authenticated:
            return jsonify({'error': 'Authentication required'}), 401
        return f(*args, **kwargs)
    return decorated


# ============== Request Parsing ==============

def get_request_fields():
    """Return submitted fields from a JSON body or a form body.

    Multipart requests (inquiries with photos) carry their fields as form
    data; everything else is JSON. Missing bodies yield an empty dict.
    """
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form.to_dict()


def blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def as_bool(value, default):
    """Coerce JSON/form booleans; None means 'omitted' and yields default."""
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)


# ============== Error Handling ==============

def error_response(message, status_code):
    return jsonify({'error': message}), status_code


def safe_error_response(e):
    """Return error response without leaking DB internals.

    - ShowroomError: its own message and status (safe to expose)
    - Everything else: logs full exception, returns generic message
    """
    if isinstance(e, ShowroomError):
        if e.status_code >= 500:
            logger.error(f'{type(e).__name__}: {e.message}')
        return error_response(e.message, e.status_code)

    logger.exception('Unhandled error in API route')
    return error_response('An internal error occurred', 500)
