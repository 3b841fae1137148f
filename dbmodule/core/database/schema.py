"""
Schema initialization.

Drops and recreates the user and restaurants tables from catalog DDL. The
order is fixed: both drops run before both creates, and the user table is
handled before the restaurants table. The first failing statement stops the
sequence; whatever already ran stays applied.
"""

from __future__ import annotations

from dbmodule.core.logging_config import get_logger

from .catalog import QueryCatalog
from .connection import Database

logger = get_logger(__name__)

SCHEMA_STATEMENTS = (
    "drop_user",
    "drop_restaurants",
    "create_user",
    "create_restaurants",
)


def initialize(database: Database, catalog: QueryCatalog) -> None:
    """Run the drop/create sequence.

    Args:
        database: Open database handle
        catalog: Catalog providing the DDL

    Raises:
        SQLError: A statement failed; later statements were not run
    """
    for name in SCHEMA_STATEMENTS:
        logger.debug(f"Executing {name}")
        database.execute(getattr(catalog, name))
    logger.info("Database schema initialized")
