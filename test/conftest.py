"""Shared fixtures for the dbmodule test suite.

Unit tests run against an in-memory SQLite database and the query catalog
bundled at ``config/queries.yaml``, both configurable through ``test/settings.py``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generator

import pytest

from dbmodule.core.config import Settings
from dbmodule.core.database import Database, QueryCatalog, initialize, load_queries
from dbmodule.core.database.entities import Restaurant, User
from test.settings import test_settings


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None, None, None]:
    """Undo any ``setup_logging`` call a test makes on the root logger."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    try:
        yield
    finally:
        for handler in root_logger.handlers[:]:
            if handler not in handlers:
                root_logger.removeHandler(handler)
                handler.close()
        for handler in handlers:
            if handler not in root_logger.handlers:
                root_logger.addHandler(handler)
        root_logger.setLevel(level)


@pytest.fixture(scope="session")
def queries_path() -> Path:
    """Path of the bundled query catalog."""
    return Path(test_settings.database.queries_path)


@pytest.fixture(scope="session")
def catalog(queries_path: Path) -> QueryCatalog:
    """The bundled query catalog."""
    return load_queries(queries_path)


@pytest.fixture
def test_config(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway database file and the bundled catalog."""
    return Settings(
        database_path=str(tmp_path / "project.db"),
        queries_path=test_settings.database.queries_path,
        log_level=test_settings.log_level,
        enable_file_logging=False,
    )


@pytest.fixture
def database() -> Generator[Database, None, None]:
    """Open in-memory database, closed after the test."""
    with Database.open(test_settings.database.url) as db:
        yield db


@pytest.fixture
def initialized_database(database: Database, catalog: QueryCatalog) -> Database:
    """In-memory database with the user and restaurants tables created."""
    initialize(database, catalog)
    return database


@pytest.fixture
def sample_user_data() -> dict:
    """Sample user data for testing."""
    return {
        "name": "lorem",
        "lastname": "lorem",
        "password": "lorem",
        "email": "lorem@example.com",
        "phone": "+88888888888",
    }


@pytest.fixture
def sample_restaurant_data() -> dict:
    """Sample restaurant data for testing."""
    return {
        "name": "ipsum",
        "type": "ipsum",
        "keys": "ipsum",
        "average_price": 2,
        "user_id": 1,
    }


@pytest.fixture
def sample_user(sample_user_data: dict) -> User:
    return User(**sample_user_data)


@pytest.fixture
def sample_restaurant(sample_restaurant_data: dict) -> Restaurant:
    return Restaurant(**sample_restaurant_data)
