"""
Base repository and row mapping utilities.

A repository binds record fields positionally into catalog inserts and scans
result rows into records. Both directions are driven by field-name tuples
declared on the subclass, so the positional contract with the SQL text is
written down in one place per table.
"""

from __future__ import annotations

from typing import Any, Generic, List, Tuple, Type, TypeVar

from pydantic import ValidationError

from dbmodule.core.errors import SQLError
from dbmodule.core.logging_config import get_logger

from ..base import Base
from ..connection import Database

logger = get_logger(__name__)

# Generic type for record models
RecordType = TypeVar("RecordType", bound=Base)


class BaseRepository(Generic[RecordType]):
    """Row mapping over a ``Database`` handle for one record type.

    Subclasses set:
        model: Record class rows are scanned into
        scan_fields: Record fields, in result column order
        bind_fields: Record fields, in insert placeholder order
    """

    model: Type[RecordType]
    scan_fields: Tuple[str, ...] = ()
    bind_fields: Tuple[str, ...] = ()

    def __init__(self, database: Database) -> None:
        """Initialize repository with an open database handle.

        Args:
            database: Handle all statements go through
        """
        self.database = database

    def bind(self, record: RecordType) -> Tuple[Any, ...]:
        """Values of ``record`` in insert placeholder order."""
        return record.column_values(self.bind_fields)

    def scan(self, row: Any, sql: str) -> RecordType:
        """Build a record from one result row.

        Raises:
            SQLError: The row width does not match or a value does not convert
        """
        values = tuple(row)
        if len(values) != len(self.scan_fields):
            raise SQLError(
                f"Expected {len(self.scan_fields)} columns for {self.model.__name__}, got {len(values)}",
                statement=sql,
            )
        try:
            return self.model.model_validate(dict(zip(self.scan_fields, values)))
        except ValidationError as e:
            raise SQLError(f"Cannot scan row into {self.model.__name__}: {e}", statement=sql) from e

    def _insert(self, record: RecordType, sql: str) -> None:
        logger.debug(f"Inserting {self.model.__name__}")
        self.database.execute(sql, self.bind(record))

    def _select(self, sql: str) -> List[RecordType]:
        records: List[RecordType] = []
        with self.database.query(sql) as rows:
            for row in rows:
                records.append(self.scan(row, sql))
        logger.debug(f"Selected {len(records)} {self.model.__name__} rows")
        return records
