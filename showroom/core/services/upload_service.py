"""Upload handling for listing images.

Validates multipart image parts, writes them under the uploads directory
with collision-resistant names and removes them again when the operation
that owns them fails.
"""
import os
import time
import secrets
import logging
from dataclasses import dataclass
from typing import List

from showroom.core.errors import ValidationError, InternalError

logger = logging.getLogger('showroom.uploads')

ALLOWED_EXTENSIONS = {'jpeg', 'jpg', 'png', 'webp'}
ALLOWED_MIME_TYPES = {'image/jpeg', 'image/jpg', 'image/png', 'image/webp'}
MAX_FILES = 5
MAX_FILE_SIZE = 5 * 1024 * 1024  # 5 MiB

PUBLIC_PATH = '/uploads'


@dataclass
class StoredUpload:
    """A file written to disk for the current request."""
    path: str
    original_name: str
    size: int
    filename: str


def present_files(files):
    """Drop empty parts (browsers send one when no file is chosen)."""
    return [f for f in files or [] if f is not None and f.filename]


class UploadService:

    def __init__(self, upload_dir):
        self.upload_dir = upload_dir

    def validate(self, files):
        """Validate every part before anything touches the disk.

        Returns a list of (file, extension, size). A single bad part fails
        the whole request.
        """
        if len(files) > MAX_FILES:
            raise ValidationError(f'Too many files. Max: {MAX_FILES}')

        checked = []
        for f in files:
            if '.' not in f.filename:
                raise ValidationError(f'Invalid filename: {f.filename}')
            ext = f.filename.rsplit('.', 1)[-1].lower()
            mime_type = (f.mimetype or '').lower()
            if ext not in ALLOWED_EXTENSIONS or mime_type not in ALLOWED_MIME_TYPES:
                raise ValidationError(
                    f'Only image files are allowed ({", ".join(sorted(ALLOWED_EXTENSIONS))})'
                )

            f.stream.seek(0, os.SEEK_END)
            size = f.stream.tell()
            f.stream.seek(0)
            if size > MAX_FILE_SIZE:
                raise ValidationError(
                    f'File too large ({size // (1024 * 1024)}MB). Max: {MAX_FILE_SIZE // (1024 * 1024)}MB'
                )
            checked.append((f, ext, size))
        return checked

    def generate_filename(self, ext, prefix='motorcycle'):
        return f'{prefix}-{int(time.time() * 1000)}-{secrets.token_hex(6)}.{ext}'

    def save(self, files, prefix='motorcycle') -> List[StoredUpload]:
        """Validate then write all parts. Either all are written or none remain."""
        checked = self.validate(files)
        os.makedirs(self.upload_dir, exist_ok=True)

        stored = []
        try:
            for f, ext, size in checked:
                filename = self.generate_filename(ext, prefix)
                path = os.path.join(self.upload_dir, filename)
                f.save(path)
                stored.append(StoredUpload(path=path, original_name=f.filename, size=size, filename=filename))
        except OSError as e:
            logger.error(f'Failed to write upload: {e}')
            self.cleanup(stored)
            raise InternalError('Failed to store uploaded files') from e

        logger.info(f'Stored {len(stored)} upload(s) in {self.upload_dir}')
        return stored

    def cleanup(self, uploads: List[StoredUpload]):
        """Best-effort removal of files written for a failed request."""
        for upload in uploads:
            try:
                os.remove(upload.path)
                logger.info(f'Removed orphaned upload {upload.filename}')
            except FileNotFoundError:
                pass
            except OSError as e:
                logger.error(f'Failed to remove orphaned upload {upload.path}: {e}')

    @staticmethod
    def public_url(base_url, filename):
        """URL of a stored file as seen by the client that uploaded it."""
        return f'{base_url.rstrip("/")}{PUBLIC_PATH}/{filename}'
