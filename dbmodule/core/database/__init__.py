"""
Database layer for dbmodule.

Structure:
- entities/: Record models (User, Restaurant, JoinRow)
- repositories/: Row mapping between records and catalog statements
- catalog.py: Loading of the named SQL statements
- connection.py: The single connection handle
- schema.py: Ordered drop/create of the tables
- utils.py: Engine creation and data source normalization
"""

from .base import Base
from .catalog import QueryCatalog, load_queries
from .connection import Database
from .schema import SCHEMA_STATEMENTS, initialize
from .utils import create_engine, to_database_url

__all__ = [
    "Base",
    "Database",
    "QueryCatalog",
    "SCHEMA_STATEMENTS",
    "create_engine",
    "initialize",
    "load_queries",
    "to_database_url",
]
