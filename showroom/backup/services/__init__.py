"""Backup services package."""
from .backup_service import BackupService, FORMAT_VERSION

__all__ = ['BackupService', 'FORMAT_VERSION']
