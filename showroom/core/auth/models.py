"""Showroom Core Auth Models.

Admin identity resolved from a session token for Flask-Login.
"""
from flask_login import UserMixin


class AdminUser(UserMixin):
    """The single site administrator, as carried inside a session token."""

    def __init__(self, user_data):
        self.id = user_data['id']
        self.username = user_data['username']
