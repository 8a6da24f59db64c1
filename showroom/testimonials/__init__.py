"""Customer testimonials module."""
from flask import Blueprint

testimonials_bp = Blueprint('testimonials', __name__)

from . import routes  # noqa: E402, F401
