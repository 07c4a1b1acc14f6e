"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Nothing is validated against the network at load time:
a missing database URL only fails the operations that need SQL.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_EXPORTERS = ("console", "otlp", "none")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "cs-portal"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"

    # Database. DIRECT_URL wins over DATABASE_URL (bypasses the connection pooler on Supabase).
    database_url: str = Field(
        default="",
        validation_alias=AliasChoices("DIRECT_URL", "DATABASE_URL"),
    )
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000"

    # Request
    request_id_header: str = "X-Request-ID"

    # Search
    search_default_limit: int = 50
    # Per-source lookup bound in seconds; unset keeps lookups unbounded.
    search_source_timeout_seconds: float | None = None
    # Run source lookups in parallel, one pooled session per lookup.
    search_concurrent_sources: bool = False
    search_rate_limit: str = "120/minute"
    rate_limit_enabled: bool = True

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def validate_search_and_telemetry(self) -> "Settings":
        """Reject values the search pipeline and telemetry setup cannot use."""
        if self.search_default_limit < 1:
            raise ValueError(
                f"SEARCH_DEFAULT_LIMIT must be a positive integer, got {self.search_default_limit}"
            )
        if (
            self.search_source_timeout_seconds is not None
            and self.search_source_timeout_seconds <= 0
        ):
            raise ValueError(
                "SEARCH_SOURCE_TIMEOUT_SECONDS must be greater than zero when set. "
                "Leave it unset to disable per-source timeouts."
            )
        if self.telemetry_exporter not in _EXPORTERS:
            raise ValueError(
                f"TELEMETRY_EXPORTER must be one of {', '.join(_EXPORTERS)}, "
                f"got: {self.telemetry_exporter!r}"
            )
        return self

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()
