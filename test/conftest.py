"""
Test Configuration and Fixtures

This module provides:
- Environment setup (SQLite database file, log directory) before any app import
- Schema creation once per session and table cleanup per integration test
- Session-scoped FastAPI TestClient
- Ticket payload helpers shared by API tests

Architecture:
- Unit tests (marked `unit`): pure domain / mocked repositories, no database
- Integration tests: real SQLite database through aiosqlite, cleaned before each test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time (src.platform.config.core_setting)
# =============================================================================
import os
from pathlib import Path


_TEST_DIR = Path(__file__).parent


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')

    test_db_dir = _TEST_DIR / 'test_db'
    test_db_dir.mkdir(exist_ok=True)
    db_file = test_db_dir / f'ticket_inventory_{worker_id}.sqlite3'
    os.environ['TEST_DB_FILE'] = str(db_file)
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_file}'

    # Create test log directory
    test_log_dir = _TEST_DIR / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Tests create their own data
    os.environ['SEED_SAMPLE_DATA'] = 'false'
    os.environ.setdefault('SEAT_LEDGER_MAX_RETRIES', '10')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import create_engine, text  # noqa: E402

from test.inventory_test_constants import DEFAULT_TICKET_PAYLOAD  # noqa: E402


def _sync_database_url() -> str:
    return f'sqlite:///{os.environ["TEST_DB_FILE"]}'


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_sessionstart(session: pytest.Session) -> None:
    _setup_test_database()


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.append('clean_database')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
def _setup_test_database() -> None:
    """Recreate the schema from the ORM models"""
    from src.platform.database.orm_db_setting import Base
    import src.service.inventory.driven_adapter.model.ticket_model  # noqa: F401

    engine = create_engine(_sync_database_url())
    try:
        Base.metadata.drop_all(engine)
        Base.metadata.create_all(engine)
    finally:
        engine.dispose()


def _clean_all_tables() -> None:
    engine = create_engine(_sync_database_url())
    try:
        with engine.begin() as conn:
            conn.execute(text('DELETE FROM ticket'))
    finally:
        engine.dispose()


@pytest.fixture(scope='function')
def clean_database() -> Generator[None, None, None]:
    _clean_all_tables()
    yield


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def create_ticket(client: TestClient) -> Callable[..., dict[str, Any]]:
    """POST a ticket (default payload + overrides) and return the stored record"""

    def _create(**overrides: Any) -> dict[str, Any]:
        response = client.post('/api/tickets', json=DEFAULT_TICKET_PAYLOAD | overrides)
        assert response.status_code == 201, response.text
        return response.json()['ticket']

    return _create


@pytest.fixture
def execute_sql_statement() -> Callable[..., list[dict[str, Any]] | None]:
    def _execute(
        statement: str, params: dict[str, Any] | None = None, fetch: bool = False
    ) -> list[dict[str, Any]] | None:
        engine = create_engine(_sync_database_url())
        try:
            with engine.begin() as conn:
                result = conn.execute(text(statement), params or {})
                if fetch:
                    return [dict(row._mapping) for row in result]
                return None
        finally:
            engine.dispose()

    return _execute
