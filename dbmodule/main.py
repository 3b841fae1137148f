"""
Main Entry Point.

Demonstration driver: loads the query catalog, recreates the schema, inserts
one sample user and one sample restaurant, then prints the users, the
restaurants and the joined rows. Every failure is fatal.
"""

from __future__ import annotations

import sys
from typing import Optional

from dbmodule.core.config import Settings, settings as default_settings
from dbmodule.core.database import Database, initialize, load_queries
from dbmodule.core.database.entities import JoinRow, Restaurant, User
from dbmodule.core.database.repositories import build_repos
from dbmodule.core.errors import DbModuleError
from dbmodule.core.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

SAMPLE_USER = User(
    name="lorem",
    lastname="lorem",
    password="lorem",
    email="lorem@example.com",
    phone="+88888888888",
)

SAMPLE_RESTAURANT = Restaurant(name="ipsum", type="ipsum", keys="ipsum", average_price=2, user_id=1)


def format_user(user: User) -> str:
    return f"User: {user.id} {user.name} {user.lastname}"


def format_restaurant(restaurant: Restaurant) -> str:
    return f"Restaurant: {restaurant.id} {restaurant.name} {restaurant.type}"


def format_join_row(row: JoinRow) -> str:
    return (
        f"User ID: {row.user_id} | Name: {row.user_name} {row.user_lastname} | "
        f"Restaurant ID: {row.restaurant_id} | Restaurant Name: {row.restaurant_name} | "
        f"Type: {row.type} | Average Price: {row.average_price}"
    )


def run(config: Settings) -> None:
    """
    Run the demonstration sequence against the configured database.

    The catalog is loaded before the database is opened, so a bad catalog
    never touches the store. The handle is closed on every path.

    Raises:
        DbModuleError: Any step failed
    """
    database_config = config.database
    queries = load_queries(database_config.queries_path)

    with Database.open(database_config.path) as database:
        initialize(database, queries)
        repos = build_repos(database)

        logger.info("Inserting sample records")
        repos.users.insert(SAMPLE_USER, queries.insert_user)
        repos.restaurants.insert(SAMPLE_RESTAURANT, queries.insert_restaurant)

        logger.info("Selecting records")

        for user in repos.users.select_all(queries.select_users):
            print(format_user(user))

        for restaurant in repos.restaurants.select_all(queries.select_restaurants):
            print(format_restaurant(restaurant))

        for row in repos.joins.select_all(queries.select_join):
            print(format_join_row(row))


def main(config: Optional[Settings] = None) -> int:
    """Console entry point. Returns the process exit code."""
    config = config or default_settings
    logging_config = config.logging
    setup_logging(
        log_level=logging_config.level,
        log_format=logging_config.format,
        enable_file=logging_config.enable_file,
        log_file_dir=logging_config.file_dir,
    )
    try:
        run(config)
    except DbModuleError as e:
        logger.critical(f"{type(e).__name__}: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
