"""Core services package."""
from .upload_service import UploadService, StoredUpload

__all__ = ['UploadService', 'StoredUpload']
