"""Unit tests for environment configuration and the database bootstrap."""
import os
import sys

import pytest
from unittest.mock import MagicMock, patch

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from showroom.config import Config, ConfigError
from showroom.database import init_db, dict_from_row

BASE_ENV = {'DATABASE_URL': 'postgresql://u:p@db/showroom', 'TOKEN_SECRET': 's3cret'}


class TestFromEnv:

    def test_defaults(self):
        config = Config.from_env(dict(BASE_ENV))
        assert config.port == 5000
        assert config.is_production is False
        assert config.effective_sslmode is None
        assert config.admin_username == 'admin'
        assert config.admin_password is None

    def test_database_url_required(self):
        with pytest.raises(ConfigError):
            Config.from_env({'TOKEN_SECRET': 's3cret'})

    def test_token_secret_required(self):
        with pytest.raises(ConfigError):
            Config.from_env({'DATABASE_URL': 'postgresql://db/showroom'})

    def test_flask_secret_key_accepted(self):
        config = Config.from_env({'DATABASE_URL': 'postgresql://db/x', 'FLASK_SECRET_KEY': 'abc'})
        assert config.token_secret == 'abc'

    def test_heroku_style_url_is_normalized(self):
        config = Config.from_env(dict(BASE_ENV, DATABASE_URL='postgres://u:p@db/showroom'))
        assert config.database_url == 'postgresql://u:p@db/showroom'

    def test_production_requires_tls(self):
        config = Config.from_env(dict(BASE_ENV, APP_ENV='Production', PORT='8080'))
        assert config.is_production is True
        assert config.effective_sslmode == 'require'
        assert config.port == 8080

    def test_sslmode_override(self):
        config = Config.from_env(dict(BASE_ENV, APP_ENV='production', DB_SSLMODE='disable'))
        assert config.effective_sslmode == 'disable'


class TestInitDb:

    def _db(self, exists):
        db = MagicMock()
        conn = MagicMock()
        cursor = MagicMock()
        cursor.fetchone.return_value = {'exists': exists}
        conn.cursor.return_value = cursor
        db.get_conn.return_value = conn
        db.transaction.return_value.__enter__.return_value = conn
        db.transaction.return_value.__exit__.return_value = False
        return db

    @patch('showroom.migrations.init_schema.create_schema')
    def test_skips_existing_schema(self, mock_create):
        init_db(self._db(exists=True))
        mock_create.assert_not_called()

    @patch('showroom.migrations.init_schema.create_schema')
    def test_creates_schema_on_empty_database(self, mock_create):
        db = self._db(exists=False)
        init_db(db)
        mock_create.assert_called_once()
        db.transaction.assert_called_once()


class TestDictFromRow:

    def test_none(self):
        assert dict_from_row(None) is None

    def test_dates_become_iso_strings(self):
        from datetime import date
        row = dict_from_row({'id': 1, 'created_at': date(2024, 1, 2), 'name': 'A'})
        assert row == {'id': 1, 'created_at': '2024-01-02', 'name': 'A'}
