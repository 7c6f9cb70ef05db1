"""Configuration management using pydantic-settings."""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Routing store settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Storage Configuration
    routing_storage_connection_string: Optional[str] = Field(
        default=None,
        description="Backing store connection string, e.g. duckdb:///./data/routing.db"
    )
    routing_partition_key: str = Field(
        default="botHandOff",
        description="Partition key shared by every record of a collection"
    )
    routing_table_prefix: str = Field(
        default="",
        description="Prefix prepended to every physical table name"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")
    log_file: Optional[str] = Field(default=None, description="Log file path")

