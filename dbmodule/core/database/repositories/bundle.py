"""
Repository bundle and operation-level helpers.

``build_repos`` wires every repository to one handle. The module-level
functions are thin shortcuts for callers that only need a single operation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..connection import Database
from ..entities import JoinRow, Restaurant, User
from .joins import JoinRepository
from .restaurants import RestaurantRepository
from .users import UserRepository


@dataclass(frozen=True)
class RepoBundle:
    """Convenience bundle of all repositories sharing one handle."""

    users: UserRepository
    restaurants: RestaurantRepository
    joins: JoinRepository


def build_repos(database: Database) -> RepoBundle:
    """Build a ``RepoBundle`` over ``database``."""
    return RepoBundle(
        users=UserRepository(database),
        restaurants=RestaurantRepository(database),
        joins=JoinRepository(database),
    )


def insert_user(database: Database, user: User, sql: str) -> None:
    UserRepository(database).insert(user, sql)


def insert_restaurant(database: Database, restaurant: Restaurant, sql: str) -> None:
    RestaurantRepository(database).insert(restaurant, sql)


def select_users(database: Database, sql: str) -> List[User]:
    return UserRepository(database).select_all(sql)


def select_restaurants(database: Database, sql: str) -> List[Restaurant]:
    return RestaurantRepository(database).select_all(sql)


def select_join(database: Database, sql: str) -> List[JoinRow]:
    return JoinRepository(database).select_all(sql)
