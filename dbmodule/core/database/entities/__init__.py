"""
Record models for the database layer.

The tables themselves are created from catalog DDL, so these models are
plain (non-table) SQLModel classes used to bind inserts and to receive
scanned rows.
"""

from .join_rows import JoinRow
from .restaurants import Restaurant
from .users import User

__all__ = [
    "JoinRow",
    "Restaurant",
    "User",
]
