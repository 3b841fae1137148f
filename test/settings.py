"""
Test Configuration Settings.

This module defines the test environment configuration using Pydantic's BaseSettings.
Pydantic automatically loads configuration from the test/.env file via env_file configuration.

Environment variables use the ``DBMODULE_TEST_`` prefix and double underscore (__)
as delimiters for nested properties.
For example: DBMODULE_TEST_DATABASE__QUERIES_PATH maps to test_settings.database.queries_path
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dbmodule.core.config import LogLevel

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class TestDatabaseConfig(BaseModel):
    """Database configuration container for tests."""

    url: str = Field(
        default=":memory:",
        description="Data source for unit tests (defaults to in-memory SQLite)",
    )
    queries_path: str = Field(
        default=str(PROJECT_ROOT / "config" / "queries.yaml"),
        description="Query catalog the tests run against",
    )

    model_config = ConfigDict(strict=False)


# =====================================================================
# Main Test Settings Class
# =====================================================================


class TestSettings(BaseSettings):
    """
    Test environment settings model.

    All properties are automatically bound from environment variables and .env file
    in the test directory.

    Examples:
    - DBMODULE_TEST_DATABASE__URL → test_settings.database.url
    - DBMODULE_TEST_LOG_LEVEL → test_settings.log_level
    """

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent / ".env"),
        env_file_encoding="utf-8",
        env_prefix="DBMODULE_TEST_",
        extra="ignore",
        env_nested_delimiter="__",
    )

    database: TestDatabaseConfig = Field(
        default_factory=TestDatabaseConfig,
        description="Database configuration for tests",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level for tests that run the driver",
    )


_test_settings_instance: Optional[TestSettings] = None


def get_test_settings() -> TestSettings:
    """Get the test settings instance, creating it on first use."""
    global _test_settings_instance

    if _test_settings_instance is None:
        _test_settings_instance = TestSettings()
    return _test_settings_instance


test_settings = get_test_settings()
