"""
User repository.

Binds users into the catalog's ``insert_user`` statement and scans the rows
of ``select_users``.
"""

from __future__ import annotations

from typing import List

from ..entities.users import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for the user table."""

    model = User
    scan_fields = ("id", "name", "lastname", "password", "email", "phone")
    bind_fields = ("name", "lastname", "password", "email", "phone")

    def insert(self, user: User, sql: str) -> None:
        """Insert one user. The identity is assigned by the store.

        Args:
            user: User to insert
            sql: Insert statement with five positional placeholders

        Raises:
            SQLError: The statement failed
        """
        self._insert(user, sql)

    def select_all(self, sql: str) -> List[User]:
        """Select users in the order the query returns them.

        Raises:
            SQLError: The query failed or a row could not be scanned
        """
        return self._select(sql)
