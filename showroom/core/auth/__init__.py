"""Showroom Core Authentication Module.

Single-admin login and signed session tokens.
"""
from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from . import routes  # noqa: E402, F401
