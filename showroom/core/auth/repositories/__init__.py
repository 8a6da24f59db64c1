"""Auth repositories package."""
from .admin_repository import AdminRepository

__all__ = ['AdminRepository']
