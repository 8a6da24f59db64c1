"""Customer inquiries (sell/trade-in requests) module."""
from flask import Blueprint

inquiries_bp = Blueprint('inquiries', __name__)

from . import routes  # noqa: E402, F401
