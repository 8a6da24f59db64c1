"""Auth services package."""
from .auth_service import AuthService, TOKEN_TTL

__all__ = ['AuthService', 'TOKEN_TTL']
