"""
Joined user/restaurant projection.
"""

from __future__ import annotations

from sqlmodel import Field

from ..base import Base


class JoinRow(Base):
    """One row of the user/restaurant join. Read-only, never persisted."""

    user_id: int
    user_name: str
    user_lastname: str
    restaurant_id: int
    restaurant_name: str
    type: str
    average_price: int = Field(description="Average price of the restaurant")
