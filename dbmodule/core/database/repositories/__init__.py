"""
Repositories for the database layer.

Each repository maps one record type to and from catalog statements:
- UserRepository: user inserts and selects
- RestaurantRepository: restaurant inserts and selects
- JoinRepository: the joined user/restaurant read
"""

from .base import BaseRepository
from .bundle import (
    RepoBundle,
    build_repos,
    insert_restaurant,
    insert_user,
    select_join,
    select_restaurants,
    select_users,
)
from .joins import JoinRepository
from .restaurants import RestaurantRepository
from .users import UserRepository

__all__ = [
    "BaseRepository",
    "JoinRepository",
    "RepoBundle",
    "RestaurantRepository",
    "UserRepository",
    "build_repos",
    "insert_restaurant",
    "insert_user",
    "select_join",
    "select_restaurants",
    "select_users",
]
