"""Error types raised by the data-access layer.

Purpose:
- Give callers one base class, ``DbModuleError``, to catch for any failure
  coming out of the catalog loader, the connection handle or the mappers.
- Keep the offending input (file path, data source, SQL text) on the
  exception for diagnosis.

Usage:
- Catch ``ConfigError`` when loading the query catalog.
- Catch ``DatabaseConnectionError`` when opening the store.
- Catch ``SQLError`` around any prepare/execute/scan.
"""

from __future__ import annotations

from typing import Optional


class DbModuleError(Exception):
    pass


class ConfigError(DbModuleError):
    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"Cannot load query catalog '{path}': {message}")
        self.path = path


class DatabaseConnectionError(DbModuleError):
    def __init__(self, data_source: str, message: str) -> None:
        super().__init__(f"Cannot open database '{data_source}': {message}")
        self.data_source = data_source


class SQLError(DbModuleError):
    """Failure while preparing, executing or scanning a statement.

    Args:
        message: Human-readable error description.
        statement: SQL text that was being applied, if any.
    """

    def __init__(self, message: str, *, statement: Optional[str] = None) -> None:
        super().__init__(message)
        self.statement = statement
