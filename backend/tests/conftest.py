"""
Pytest configuration and shared fixtures.

Every test gets its own in-memory SQLite database through ``create_app``.
"""

import pytest
from typing import Dict
from fastapi.testclient import TestClient
from sqlalchemy import text

from jobly.config import Settings
from jobly.main import create_app
from jobly.repositories.job import JobRepository
from jobly.utils.token_utils import create_access_token


@pytest.fixture
def settings() -> Settings:
    """Settings for an isolated in-memory database."""
    return Settings(
        database_url="sqlite://",
        jwt_secret_key="test-secret",
        log_level="WARNING",
        _env_file=None,
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    yield app
    app.state.engine.dispose()


@pytest.fixture
def db_session(app):
    session = app.state.session_factory()
    yield session
    session.close()


@pytest.fixture
def companies(db_session) -> None:
    """Three companies, c1..c3."""
    db_session.execute(
        text(
            """
            INSERT INTO companies (handle, name, num_employees, description, logo_url)
            VALUES ('c1', 'C1', 1, 'Desc1', 'http://c1.img'),
                   ('c2', 'C2', 2, 'Desc2', 'http://c2.img'),
                   ('c3', 'C3', 3, 'Desc3', 'http://c3.img')
            """
        )
    )
    db_session.commit()


@pytest.fixture
def jobs(db_session, companies) -> Dict[str, int]:
    """Seed jobs and return their ids keyed by title."""
    repo = JobRepository(db_session)
    seeded = [
        repo.create("Software Engineer", 80000, 0.05, "c1"),
        repo.create("Data Analyst", 60000, 0.03, "c2"),
        repo.create("Product Manager", 100000, None, "c3"),
        repo.create("Intern", None, 0.0, "c1"),
    ]
    return {job["title"]: job["id"] for job in seeded}


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def admin_headers(settings) -> Dict[str, str]:
    token = create_access_token({"sub": "admin", "isAdmin": True}, settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(settings) -> Dict[str, str]:
    token = create_access_token({"sub": "u1", "isAdmin": False}, settings)
    return {"Authorization": f"Bearer {token}"}
