"""
Tests for jobly.config and the app factory wiring.
"""

import pytest
from pydantic import ValidationError
from sqlalchemy import text

from jobly.config import Settings
from jobly.main import create_app


class TestSettings:
    """Test Settings loading."""

    def test_secret_required(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET_KEY", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "from-env")
        monkeypatch.setenv("DATABASE_URL", "sqlite:///tmp/x.db")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = Settings(_env_file=None)
        assert settings.jwt_secret_key == "from-env"
        assert settings.database_url == "sqlite:///tmp/x.db"
        assert settings.log_level == "DEBUG"
        assert settings.is_sqlite

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(jwt_secret_key="s", log_level="LOUD", _env_file=None)

    def test_defaults(self):
        settings = Settings(jwt_secret_key="s", _env_file=None)
        assert settings.jwt_algorithm == "HS256"
        assert settings.access_token_expire_minutes == 60 * 24


class TestCreateApp:
    """Test that each app owns its store."""

    def test_apps_do_not_share_data(self, settings):
        first = create_app(settings)
        second = create_app(settings)

        with first.state.session_factory() as session:
            session.execute(text("INSERT INTO companies (handle, name) VALUES ('c1', 'C1')"))
            session.commit()

        with second.state.session_factory() as session:
            count = session.execute(text("SELECT COUNT(*) FROM companies")).scalar_one()
        assert count == 0

        first.state.engine.dispose()
        second.state.engine.dispose()

    def test_file_database(self, tmp_path):
        settings = Settings(
            database_url=f"sqlite:///{tmp_path / 'jobly.db'}",
            jwt_secret_key="s",
            _env_file=None,
        )
        app = create_app(settings)
        assert (tmp_path / "jobly.db").exists()
        app.state.engine.dispose()
