"""Admin Repository - Data access layer for the admin credential.

The application only reads the credential row; it is written once by the
startup seed and never updated afterwards.
"""
from typing import Optional, Dict, Any
from werkzeug.security import generate_password_hash, check_password_hash

from showroom.core.base_repository import BaseRepository


class AdminRepository(BaseRepository):
    """Repository for admin_users data access."""

    def get_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        """Get the admin row by exact username match."""
        return self.query_one('''
            SELECT id, username, password_hash, created_at
            FROM admin_users
            WHERE username = %s
        ''', (username,))

    def count(self) -> int:
        row = self.query_one('SELECT COUNT(*) AS count FROM admin_users')
        return row['count'] if row else 0

    def create(self, username: str, password: str) -> Optional[Dict[str, Any]]:
        """Insert an admin row. Returns None if the username already exists."""
        return self.execute('''
            INSERT INTO admin_users (username, password_hash)
            VALUES (%s, %s)
            ON CONFLICT (username) DO NOTHING
            RETURNING id, username, created_at
        ''', (username, generate_password_hash(password)), returning=True)

    def authenticate(self, username: str, password: str) -> Optional[Dict[str, Any]]:
        """Return the admin row if the password matches its stored hash."""
        admin = self.get_by_username(username)
        if not admin or not admin.get('password_hash'):
            return None
        if not check_password_hash(admin['password_hash'], password):
            return None
        return admin
