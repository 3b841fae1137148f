"""
Database utility functions for engine creation.

Functions:
- to_database_url: Normalizes a data source identifier to a SQLAlchemy URL
- create_engine: Creates the SQLAlchemy engine backing a ``Database`` handle
"""

from __future__ import annotations

from sqlalchemy import Engine
from sqlalchemy import create_engine as sa_create_engine

MEMORY_DATA_SOURCE = ":memory:"


def to_database_url(data_source: str) -> str:
    """Turn a data source identifier into a SQLAlchemy URL.

    Anything that already looks like a URL is kept as is. ``:memory:`` maps
    to an in-memory SQLite database and any other value is taken as the path
    of a SQLite file.

    Args:
        data_source: File path, ``:memory:`` or database URL

    Returns:
        SQLAlchemy database URL
    """
    if "://" in data_source:
        return data_source
    if data_source == MEMORY_DATA_SOURCE:
        return "sqlite://"
    return f"sqlite:///{data_source}"


def create_engine(data_source: str) -> Engine:
    """Create a synchronous SQLAlchemy engine.

    Statements run in autocommit mode: every statement takes effect on its
    own, the way a bare driver connection behaves.

    Args:
        data_source: File path, ``:memory:`` or database URL

    Returns:
        Configured Engine instance
    """
    return sa_create_engine(to_database_url(data_source), isolation_level="AUTOCOMMIT")
