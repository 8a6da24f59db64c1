"""Auth Service - Business logic for admin authentication.

Issues and verifies signed, time-boxed session tokens. Tokens carry the
admin id and username, are signed with the process-wide secret and expire
8 hours after issuance. There is no session table and no revocation: a
token stays valid until it expires.
"""
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any

from itsdangerous import URLSafeTimedSerializer, BadData

from showroom.core.errors import Unauthorized, ValidationError
from showroom.core.utils.logging_config import get_logger

logger = get_logger('showroom.auth')

TOKEN_TTL = timedelta(hours=8)
TOKEN_SALT = 'showroom-admin-session'


class AuthService:
    """Service for admin login, token issuance and verification."""

    def __init__(self, admin_repo, secret_key: str):
        if not secret_key:
            raise ValueError('A signing secret is required')
        self.admin_repo = admin_repo
        self._serializer = URLSafeTimedSerializer(secret_key, salt=TOKEN_SALT)

    def login(self, username: str, password: str) -> Dict[str, Any]:
        """Check credentials and issue a session token.

        Raises:
            ValidationError: username or password missing
            Unauthorized: unknown username or wrong password
        """
        if not username or not password:
            raise ValidationError('Username and password are required')

        admin = self.admin_repo.authenticate(username, password)
        if not admin:
            logger.warning(f'Failed admin login attempt for {username}')
            raise Unauthorized('Invalid credentials')

        user = {'id': admin['id'], 'username': admin['username']}
        token, expires_at = self.issue_token(user)
        logger.info(f'Admin {username} logged in')
        return {
            'token': token,
            'expires_at': expires_at.isoformat(),
            'user': user,
        }

    def issue_token(self, user: Dict[str, Any]):
        """Sign {sub, username}. Returns (token, expires_at)."""
        token = self._serializer.dumps({'sub': user['id'], 'username': user['username']})
        expires_at = datetime.now(timezone.utc) + TOKEN_TTL
        return token, expires_at

    def verify(self, token) -> Dict[str, Any]:
        """Validate a token by signature and age only.

        Never raises: bad signatures, expired tokens and garbage all come
        back as {'valid': False}.
        """
        user = self.resolve(token)
        if user is None:
            return {'valid': False}
        return {'valid': True, 'user': user}

    def resolve(self, token) -> Optional[Dict[str, Any]]:
        """Return the user embedded in a valid token, else None."""
        if not isinstance(token, str) or not token:
            return None
        try:
            payload = self._serializer.loads(token, max_age=int(TOKEN_TTL.total_seconds()))
        except BadData:
            return None
        if not isinstance(payload, dict) or 'sub' not in payload or 'username' not in payload:
            return None
        return {'id': payload['sub'], 'username': payload['username']}

    def seed_admin(self, username: str, password: Optional[str] = None) -> bool:
        """Create the one admin credential if none exists yet.

        Returns True when a row was created.
        """
        if self.admin_repo.count() > 0:
            return False

        if not password:
            password = secrets.token_urlsafe(12)
            logger.warning(
                f'ADMIN_PASSWORD not set - generated password for {username!r}: {password} '
                '(shown once, store it now)'
            )

        created = self.admin_repo.create(username, password)
        if created:
            logger.info(f'Seeded admin credential for {username}')
        return created is not None
