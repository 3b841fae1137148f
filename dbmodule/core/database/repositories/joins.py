"""
Joined user/restaurant reads.
"""

from __future__ import annotations

from typing import List

from ..entities.join_rows import JoinRow
from .base import BaseRepository


class JoinRepository(BaseRepository[JoinRow]):
    """Read-only repository for the user/restaurant join."""

    model = JoinRow
    scan_fields = (
        "user_id",
        "user_name",
        "user_lastname",
        "restaurant_id",
        "restaurant_name",
        "type",
        "average_price",
    )

    def select_all(self, sql: str) -> List[JoinRow]:
        return self._select(sql)
