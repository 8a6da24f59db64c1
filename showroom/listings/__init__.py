"""Motorcycle listings module (listings and their images)."""
from flask import Blueprint

listings_bp = Blueprint('listings', __name__)

from . import routes  # noqa: E402, F401
