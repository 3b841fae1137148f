"""Unit tests for the shared row mapping in BaseRepository."""

from __future__ import annotations

from contextlib import contextmanager
from unittest.mock import MagicMock

import pytest

from dbmodule.core.database.repositories import UserRepository, build_repos
from dbmodule.core.database.repositories.bundle import RepoBundle
from dbmodule.core.errors import SQLError

GOOD_ROW = (1, "lorem", "lorem", "lorem", "lorem@example.com", "+88888888888")


class FakeDatabase:
    """Stands in for Database.query and records whether the cursor was released."""

    def __init__(self, rows):
        self.rows = rows
        self.released = False

    @contextmanager
    def query(self, sql):
        try:
            yield iter(self.rows)
        finally:
            self.released = True


class TestScan:
    def test_scan_builds_record(self):
        user = UserRepository(MagicMock()).scan(GOOD_ROW, "SELECT")

        assert user.id == 1
        assert user.phone == "+88888888888"

    def test_scan_rejects_extra_columns(self):
        with pytest.raises(SQLError) as exc_info:
            UserRepository(MagicMock()).scan(GOOD_ROW + ("extra",), "SELECT *")

        assert exc_info.value.statement == "SELECT *"

    def test_scan_rejects_bad_value(self):
        with pytest.raises(SQLError):
            UserRepository(MagicMock()).scan(("one",) + GOOD_ROW[1:], "SELECT")


class TestSelectReleasesCursor:
    def test_released_on_success(self):
        database = FakeDatabase([GOOD_ROW, GOOD_ROW])

        users = UserRepository(database).select_all("SELECT")

        assert len(users) == 2
        assert database.released

    def test_released_on_scan_error(self):
        database = FakeDatabase([GOOD_ROW, (None,) * 6])

        with pytest.raises(SQLError):
            UserRepository(database).select_all("SELECT")

        assert database.released


class TestBuildRepos:
    def test_bundle_shares_handle(self):
        database = MagicMock()

        repos = build_repos(database)

        assert isinstance(repos, RepoBundle)
        assert repos.users.database is database
        assert repos.restaurants.database is database
        assert repos.joins.database is database
