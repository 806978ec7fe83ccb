"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import PostgresDsn, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Built once at startup and passed to the components that need it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # App
    app_env: Literal["development", "production", "test"] = "development"
    app_name: str = "MiniPress"
    app_url: str = "https://localhost:8443"
    app_domain: str | None = None
    app_secret_key: str

    @field_validator("app_secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Ensure secret key is strong enough."""
        if len(v) < 32:
            raise ValueError("APP_SECRET_KEY must be at least 32 characters long")
        if v == "change-me-to-a-secure-random-string":
            raise ValueError("APP_SECRET_KEY must be changed from the default value")
        return v

    @field_validator("app_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] | None = None

    # Server
    host: str = "0.0.0.0"
    port: int = 8443
    ssl_private_key: Path | None = None
    ssl_certificate_chain: Path | None = None

    # Database
    database_url: PostgresDsn

    # GitHub OAuth
    github_client_id: str
    github_client_secret: str
    github_auth_url: str = "https://github.com/login/oauth/authorize"
    github_token_url: str = "https://github.com/login/oauth/access_token"
    github_api_url: str = "https://api.github.com"
    github_callback_path: str = "/auth"
    github_scope: str = "read:user user:email"

    @field_validator("github_callback_path")
    @classmethod
    def validate_callback_path(cls, v: str) -> str:
        """The callback is mounted as a route, so it must be an absolute path."""
        if not v.startswith("/"):
            raise ValueError("GITHUB_CALLBACK_PATH must start with a /")
        if len(v) < 2:
            raise ValueError("GITHUB_CALLBACK_PATH must name a path, not just /")
        return v

    @field_validator("github_api_url")
    @classmethod
    def strip_api_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_tls_files(self) -> "Settings":
        """TLS key and certificate must be given together and must exist."""
        key, cert = self.ssl_private_key, self.ssl_certificate_chain
        if (key is None) != (cert is None):
            raise ValueError("SSL_PRIVATE_KEY and SSL_CERTIFICATE_CHAIN must be set together")
        for path in (key, cert):
            if path is not None and not path.is_file():
                raise ValueError(f"TLS file not found: {path}")
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def tls_enabled(self) -> bool:
        return self.ssl_private_key is not None

    @property
    def github_redirect_uri(self) -> str:
        """Absolute URL the provider sends the user back to."""
        return f"{self.app_url}{self.github_callback_path}"

    @property
    def database_url_async(self) -> str:
        """Get async database URL (postgresql+asyncpg)."""
        url = str(self.database_url)
        return url.replace("postgresql://", "postgresql+asyncpg://")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore[call-arg]
