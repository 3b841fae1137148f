"""
User record model.

A user as stored in the ``user`` table. The identity is assigned by the
store on insert, so it is ``None`` on records that have not been read back.
"""

from __future__ import annotations

from typing import Optional

from pydantic import SecretStr
from sqlmodel import Field

from ..base import Base


class User(Base):
    """Record for a row of the user table.

    The password is persisted as given. It is held as a ``SecretStr`` so it
    stays out of reprs and log lines.
    """

    id: Optional[int] = Field(default=None, description="Store-assigned identity")
    name: str = Field(description="First name")
    lastname: str = Field(description="Last name")
    password: SecretStr = Field(description="Password, stored as plain text")
    email: str = Field(description="Email address")
    phone: str = Field(description="Phone number")

    def __repr__(self) -> str:
        return f"User(id={self.id}, name={self.name}, lastname={self.lastname})"
