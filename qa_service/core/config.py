"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        trace_store: Log every store read and write at DEBUG.
        rate_limit_enabled: Turn per-client rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.
        cors_allow_origins: Origins allowed to call the API ("*" for any).
        cors_allow_methods: HTTP methods allowed in cross-origin requests.
        cors_allow_headers: Request headers allowed in cross-origin requests.
        seed_path: Optional override for the seed questions fixture.
        host: Interface the development server binds to.
        port: Port the development server listens on.
    """

    model_config = SettingsConfigDict(
        env_prefix="QA_", env_file=".env", env_file_encoding="utf-8"
    )

    project_name: str = "QA Service"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    trace_store: bool = False
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    cors_allow_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["PUT", "POST", "GET", "DELETE"]
    cors_allow_headers: list[str] = ["content-type"]

    seed_path: Optional[str] = None

    host: str = "127.0.0.1"
    port: int = 3030


settings = Settings()
