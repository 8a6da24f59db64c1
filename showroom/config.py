"""Runtime configuration read from the environment once at startup."""
import os
from dataclasses import dataclass
from typing import Optional

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class ConfigError(RuntimeError):
    pass


@dataclass
class Config:
    database_url: str
    token_secret: str
    port: int = 5000
    app_env: str = 'development'
    db_sslmode: Optional[str] = None
    db_pool_min_conn: int = 1
    db_pool_max_conn: int = 8
    upload_dir: str = os.path.join(_PROJECT_ROOT, 'uploads')
    static_dir: str = os.path.join(_PROJECT_ROOT, 'public')
    admin_username: str = 'admin'
    admin_password: Optional[str] = None
    log_level: str = 'INFO'

    @property
    def is_production(self) -> bool:
        return self.app_env == 'production'

    @property
    def effective_sslmode(self) -> Optional[str]:
        """sslmode passed to psycopg2.

        Production talks TLS to the store without verifying the certificate
        (managed hosts with self-signed chains), unless DB_SSLMODE overrides it.
        """
        if self.db_sslmode:
            return self.db_sslmode
        return 'require' if self.is_production else None

    @classmethod
    def from_env(cls, environ=None) -> 'Config':
        env = os.environ if environ is None else environ

        database_url = env.get('DATABASE_URL')
        if not database_url:
            raise ConfigError("DATABASE_URL environment variable is required. Set it to your PostgreSQL connection string.")
        if database_url.startswith('postgres://'):
            database_url = database_url.replace('postgres://', 'postgresql://', 1)

        token_secret = env.get('TOKEN_SECRET') or env.get('FLASK_SECRET_KEY')
        if not token_secret:
            raise ConfigError('TOKEN_SECRET environment variable is required to sign admin session tokens')

        return cls(
            database_url=database_url,
            token_secret=token_secret,
            port=int(env.get('PORT', '5000')),
            app_env=env.get('APP_ENV', 'development').lower(),
            db_sslmode=env.get('DB_SSLMODE') or None,
            db_pool_min_conn=int(env.get('DB_POOL_MIN_CONN', '1')),
            db_pool_max_conn=int(env.get('DB_POOL_MAX_CONN', '8')),
            upload_dir=env.get('UPLOAD_DIR') or os.path.join(_PROJECT_ROOT, 'uploads'),
            static_dir=env.get('STATIC_DIR') or os.path.join(_PROJECT_ROOT, 'public'),
            admin_username=env.get('ADMIN_USERNAME', 'admin'),
            admin_password=env.get('ADMIN_PASSWORD') or None,
            log_level=env.get('LOG_LEVEL', 'INFO'),
        )
