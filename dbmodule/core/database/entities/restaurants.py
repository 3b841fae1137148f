"""
Restaurant record model.

A restaurant as stored in the ``restaurants`` table, owned by a user
through ``user_id``. The reference is not enforced by this layer.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class Restaurant(Base):
    """Record for a row of the restaurants table."""

    id: Optional[int] = Field(default=None, description="Store-assigned identity")
    name: str = Field(description="Restaurant name")
    type: str = Field(description="Free-text category")
    keys: str = Field(description="Opaque string attribute")
    average_price: int = Field(description="Average price")
    user_id: int = Field(default=0, description="Identity of the owning user")

    def __repr__(self) -> str:
        return f"Restaurant(id={self.id}, name={self.name}, user_id={self.user_id})"
