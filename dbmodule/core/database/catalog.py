"""
Query catalog loading.

The SQL text the layer runs is kept outside the code in a YAML file that
maps nine fixed names to statements. The text is opaque here: nothing is
parsed or validated, and a name missing from the file is an empty string
so the failure surfaces when the statement is used.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dbmodule.core.errors import ConfigError
from dbmodule.core.logging_config import get_logger

logger = get_logger(__name__)


class QueryCatalog(BaseModel):
    """Named SQL statements, loaded once and never mutated."""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    drop_user: str = Field(default="", description="Drop the user table")
    drop_restaurants: str = Field(default="", description="Drop the restaurants table")
    create_user: str = Field(default="", description="Create the user table")
    create_restaurants: str = Field(default="", description="Create the restaurants table")
    insert_user: str = Field(default="", description="Insert one user, five positional parameters")
    insert_restaurant: str = Field(default="", description="Insert one restaurant, five positional parameters")
    select_users: str = Field(default="", description="Select all users")
    select_restaurants: str = Field(default="", description="Select all restaurants")
    select_join: str = Field(default="", description="Select users joined with their restaurants")

    def empty_entries(self) -> list[str]:
        """Names of the statements that are blank."""
        return [name for name, sql in self.model_dump().items() if not sql.strip()]


def load_queries(path: Union[str, Path]) -> QueryCatalog:
    """Load the query catalog from a YAML file.

    Args:
        path: Location of the YAML file

    Returns:
        The loaded catalog

    Raises:
        ConfigError: The file is missing, unreadable or not a mapping of strings
    """
    source = Path(path)
    logger.info(f"Loading query catalog from {source}")
    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(str(source), e.strerror or str(e)) from e

    try:
        document = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(str(source), f"invalid YAML: {e}") from e

    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise ConfigError(str(source), f"expected a mapping, got {type(document).__name__}")

    # A key written with no value reads as null; treat it as absent.
    entries = {key: value for key, value in document.items() if value is not None}
    try:
        catalog = QueryCatalog.model_validate(entries)
    except ValidationError as e:
        raise ConfigError(str(source), f"invalid entry: {e}") from e

    missing = catalog.empty_entries()
    if missing:
        logger.warning(f"Query catalog {source} has no SQL for: {', '.join(missing)}")
    return catalog
