# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""SchoolDesk configuration.

Each concern reads its own environment prefix (DATABASE_, AUTH_,
RATE_LIMIT_, CORS_, API_). Settings bundles them together with the
environment name and log level; get_settings() caches one instance per
process.

Example:
    >>> from schooldesk.core.config.settings import get_settings
    >>> get_settings().auth.session_cookie_name
    'schooldesk.session_token'
"""

from functools import lru_cache
from typing import Literal, Self

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE_PASSWORD = "schooldesk_password"


class DatabaseSettings(BaseSettings):
    """Primary database configuration.

    All organizations share one database; rows are scoped by the owning
    user id.

    Attributes:
        user: PostgreSQL username.
        password: PostgreSQL password.
        host: Server hostname.
        port: Server port.
        database: Database name.
        url_override: Full async connection URL. Takes precedence over the
            individual components when set (e.g. sqlite+aiosqlite for tests).
        pool_size: Persistent connections kept by the pool.
        max_overflow: Extra connections allowed under load.
        auto_create: Create missing tables at startup.
    """

    model_config = SettingsConfigDict(
        env_prefix="DATABASE_",
        extra="ignore",
    )

    user: str = "schooldesk"
    password: SecretStr = SecretStr(DEFAULT_DATABASE_PASSWORD)
    host: str = "localhost"
    port: int = 5432
    database: str = "schooldesk"
    url_override: str | None = Field(default=None, validation_alias="DATABASE_URL")
    pool_size: int = 10
    max_overflow: int = 20
    auto_create: bool = False

    @property
    def url(self) -> str:
        """Async SQLAlchemy URL, DATABASE_URL first."""
        if self.url_override:
            return self.url_override
        secret = self.password.get_secret_value()
        return f"postgresql+asyncpg://{self.user}:{secret}@{self.host}:{self.port}/{self.database}"

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite."""
        return self.url.startswith("sqlite")


class AuthSettings(BaseSettings):
    """Session authentication configuration.

    Sessions are issued by the external auth service and stored in the
    user_sessions table; this API only reads them.

    Attributes:
        session_cookie_name: Cookie carrying the session token.
        base_url: Public URL of the auth service.
        password_hash_rounds: bcrypt rounds for passwords set through the API.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        extra="ignore",
    )

    session_cookie_name: str = "schooldesk.session_token"
    base_url: str = "http://localhost:3000"
    password_hash_rounds: int = 12


class RateLimitSettings(BaseSettings):
    """Request throttling applied by slowapi.

    Attributes:
        enabled: Install the limiter middleware.
        requests_per_minute: Default limit for each user or client address.
        storage_uri: slowapi storage backend URI.
    """

    model_config = SettingsConfigDict(
        env_prefix="RATE_LIMIT_",
        extra="ignore",
    )

    enabled: bool = True
    requests_per_minute: int = 120
    storage_uri: str = "memory://"


class CORSSettings(BaseSettings):
    """Cross-origin access for the dashboard and family portal.

    Attributes:
        origins: Allowed origins, comma separated.
        allow_credentials: Send cookies cross-origin; needed for sessions.
        allow_methods: Methods the browser may use.
        allow_headers: Headers the browser may send.
    """

    model_config = SettingsConfigDict(
        env_prefix="CORS_",
        extra="ignore",
    )

    origins: str = "http://localhost:3000,http://localhost:3001"
    allow_credentials: bool = True
    allow_methods: list[str] = ["*"]
    allow_headers: list[str] = ["*"]

    @property
    def origins_list(self) -> list[str]:
        """Origins as a list, blanks dropped."""
        return [value.strip() for value in self.origins.split(",") if value.strip()]


class APISettings(BaseSettings):
    """uvicorn options used by ``schooldesk.main.run``.

    Attributes:
        host: Bind address.
        port: Bind port.
        workers: Worker processes when reload is off.
        reload: Restart on code changes (development only).
    """

    model_config = SettingsConfigDict(
        env_prefix="API_",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 2
    reload: bool = False


class Settings(BaseSettings):
    """Top-level settings.

    Prefer get_settings() over constructing this directly, except in tests.

    Attributes:
        environment: development, staging or production.
        debug: Enable debug mode.
        log_level: Logging level.
        db: Database settings.
        auth: Session authentication settings.
        rate_limit: Rate limiting settings.
        cors: CORS settings.
        api: API server settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"

    # Each reads its own prefix
    db: DatabaseSettings = Field(default_factory=DatabaseSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    rate_limit: RateLimitSettings = Field(default_factory=RateLimitSettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)
    api: APISettings = Field(default_factory=APISettings)

    @model_validator(mode="after")
    def validate_production_settings(self) -> Self:
        """Refuse to run production on the default database password.

        Raises:
            ValueError: If production uses the default password.
        """
        if self.environment == "production" and not self.db.url_override:
            if self.db.password.get_secret_value() == DEFAULT_DATABASE_PASSWORD:
                raise ValueError(
                    "Database password must be changed from default in production. "
                    "Set DATABASE_PASSWORD environment variable."
                )
        return self

    @property
    def is_development(self) -> bool:
        """True in development."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """True in production."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings loaded once from the environment.

    Returns:
        The process-wide Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
