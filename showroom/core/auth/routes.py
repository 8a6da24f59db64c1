"""Auth module routes.

Admin login and token verification.
"""
from flask import jsonify

from . import auth_bp
from showroom.core.context import get_context
from showroom.core.errors import ValidationError
from showroom.core.utils.api_helpers import get_request_fields


@auth_bp.route('/admin/login', methods=['POST'])
def api_admin_login():
    """Exchange username/password for a signed session token."""
    data = get_request_fields()
    username = data.get('username') or ''
    password = data.get('password') or ''
    if not isinstance(username, str) or not isinstance(password, str):
        raise ValidationError('Username and password are required')
    return jsonify(get_context().auth.login(username.strip(), password))


@auth_bp.route('/admin/verify', methods=['POST'])
def api_admin_verify():
    """Report whether a token is still valid. Always answers 200."""
    data = get_request_fields()
    return jsonify(get_context().auth.verify(data.get('token')))
