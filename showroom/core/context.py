"""Process-wide application context lookup.

create_app() stores a ShowroomContext in ``app.extensions['showroom']``.
Routes reach their controller through get_context() instead of importing
module-level singletons.
"""
from flask import current_app

EXTENSION_KEY = 'showroom'


def get_context():
    return current_app.extensions[EXTENSION_KEY]
