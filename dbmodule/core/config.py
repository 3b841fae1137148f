"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class DatabaseConfig(BaseModel):
    """Database and query catalog locations."""

    path: str = Field(
        default="./project.db",
        alias="DBMODULE_DATABASE_PATH",
        description="SQLite file path, ':memory:' or a full SQLAlchemy URL",
    )
    queries_path: str = Field(
        default="./config/queries.yaml",
        alias="DBMODULE_QUERIES_PATH",
        description="YAML file holding the named SQL statements",
    )

    model_config = {"populate_by_name": True}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default="INFO", alias="DBMODULE_LOG_LEVEL", description="Console log level")
    format: str = Field(
        default="detailed", alias="DBMODULE_LOG_FORMAT", description="Log format (simple, detailed or json)"
    )
    file_dir: str = Field(default="logs", alias="DBMODULE_LOG_FILE_DIR", description="Directory for the log file")
    enable_file: bool = Field(
        default=False, alias="DBMODULE_ENABLE_FILE_LOGGING", description="Also write logs to a file"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_path: str = Field(
        default="./project.db",
        description="SQLite file path, ':memory:' or a full SQLAlchemy URL",
        alias="DBMODULE_DATABASE_PATH",
    )
    queries_path: str = Field(
        default="./config/queries.yaml",
        description="YAML file holding the named SQL statements",
        alias="DBMODULE_QUERIES_PATH",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: LogLevel = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="DBMODULE_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log format (simple, detailed, json)",
        alias="DBMODULE_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="DBMODULE_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Write logs to <log_file_dir>/dbmodule.log as well as the console",
        alias="DBMODULE_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration from environment variables."""
        return DatabaseConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
