"""Application configuration using Pydantic settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Book Catalog"
    debug: bool = False

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True

    # Catalog behaviour
    book_id_strategy: Literal["size", "counter"] = "size"
    resolve_author_references: bool = False
    publish_committed_book: bool = False

    # Subscriptions
    subscriber_queue_size: int = Field(default=0, ge=0)  # 0 = unbounded

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
