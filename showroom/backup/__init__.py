"""Operator backup/export module."""
from flask import Blueprint

backup_bp = Blueprint('backup', __name__)

from . import routes  # noqa: E402, F401
