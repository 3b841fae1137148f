"""
Restaurant repository.

Binds restaurants into ``insert_restaurant`` and scans ``select_restaurants``
rows, including the owning user id.
"""

from __future__ import annotations

from typing import List

from ..entities.restaurants import Restaurant
from .base import BaseRepository


class RestaurantRepository(BaseRepository[Restaurant]):
    """Repository for the restaurants table."""

    model = Restaurant
    scan_fields = ("id", "name", "type", "keys", "average_price", "user_id")
    bind_fields = ("name", "type", "keys", "average_price", "user_id")

    def insert(self, restaurant: Restaurant, sql: str) -> None:
        """Insert one restaurant.

        Args:
            restaurant: Restaurant to insert
            sql: Insert statement with five positional placeholders

        Raises:
            SQLError: The statement failed
        """
        self._insert(restaurant, sql)

    def select_all(self, sql: str) -> List[Restaurant]:
        """Select restaurants in the order the query returns them.

        Raises:
            SQLError: The query failed or a row could not be scanned
        """
        return self._select(sql)
