"""Application settings and configuration.

This module defines all configuration options for the Thread Stage service.
Settings are loaded from environment variables with sensible defaults and are
read once at import time; treat the resulting ``settings`` object as
read-only process-wide configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Thread Stage", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Security and authentication
    secret_key: str = Field(alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 30,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # Database configuration
    database_url: str = Field(default="sqlite:///./thread_stage.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Topic listing
    default_page_limit: int = Field(default=30, alias="DEFAULT_PAGE_LIMIT")
    max_page_limit: int = Field(default=100, alias="MAX_PAGE_LIMIT")

    # Groups whose topics are re-ranked with gravity decay on every reply.
    # Everything else is simply bumped to the reply time.
    ranking_gravity_groups: frozenset[int] = Field(
        default=frozenset({364}),
        alias="RANKING_GRAVITY_GROUPS",
    )

    # Public user avatars
    avatar_base_url: str = Field(
        default="https://lain.bgm.tv/pic/user",
        alias="AVATAR_BASE_URL",
    )
    avatar_default_image: str = Field(default="icon.jpg", alias="AVATAR_DEFAULT_IMAGE")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )


settings = Settings()  # type: ignore[call-arg]
