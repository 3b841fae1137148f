"""
Base record model.

Every record in the database layer derives from ``Base``. Records travel to
the driver as plain positional values, so the base knows how to lay its
fields out in a given column order.
"""

from __future__ import annotations

from typing import Any, Sequence, Tuple

from pydantic import SecretStr
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel records."""

    def column_values(self, fields: Sequence[str]) -> Tuple[Any, ...]:
        """Values of ``fields`` in order, with secrets revealed for storage."""
        values = []
        for field in fields:
            value = getattr(self, field)
            if isinstance(value, SecretStr):
                value = value.get_secret_value()
            values.append(value)
        return tuple(values)
