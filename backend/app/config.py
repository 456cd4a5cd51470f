"""
Mobile Bazar Backend — Application Configuration
==================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; validated before the app starts.

Connection string resolution:
    1. MONGODB_URI, when set, is used verbatim
    2. Otherwise DB_USER / DB_PASS are combined with DB_CLUSTER_HOST into an
       Atlas `mongodb+srv://` URI (the variables the storefront always used)
    3. Otherwise a local `mongodb://localhost:27017` server is assumed
"""

from typing import List
from urllib.parse import quote_plus, urlsplit, urlunsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development.
    Production deployments MUST provide database credentials.
    """

    # ── Database ──────────────────────────────────────────────────────────
    mongodb_uri: str = Field(
        default="",
        description="Full MongoDB connection string; overrides DB_USER/DB_PASS",
    )
    db_user: str = Field(default="")
    db_pass: str = Field(default="")
    db_cluster_host: str = Field(default="cluster0.dt2b3.mongodb.net")
    db_name: str = Field(default="mobile_bazar")

    # What: Upper bounds on connection establishment and server selection
    # Valid range: 1s-60s
    db_connect_timeout_ms: int = Field(default=10_000, ge=1_000, le=60_000)
    db_server_selection_timeout_ms: int = Field(default=10_000, ge=1_000, le=60_000)

    # What: Ping the database during startup and exit if it is unreachable
    db_connect_on_startup: bool = Field(default=True)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Rate Limiting ─────────────────────────────────────────────────────
    # What: Per-IP sliding window rate limit
    rate_limit_requests: int = Field(default=100, ge=1, le=10000)
    rate_limit_window: int = Field(default=900, ge=1, le=86400)  # seconds

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def resolved_mongodb_uri(self) -> str:
        """The connection string the database client is created with."""
        if self.mongodb_uri:
            return self.mongodb_uri
        if self.db_user and self.db_pass:
            return (
                f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}"
                f"@{self.db_cluster_host}/?retryWrites=true&w=majority&appName=Cluster0"
            )
        return "mongodb://localhost:27017"

    @property
    def redacted_mongodb_uri(self) -> str:
        """
        What:  The resolved URI with any password replaced by `****`.
        Why:   Connection strings are logged at startup; credentials must not be.
        """
        parts = urlsplit(self.resolved_mongodb_uri)
        if parts.password is None:
            return self.resolved_mongodb_uri
        netloc = parts.netloc.replace(f":{parts.password}@", ":****@", 1)
        return urlunsplit(parts._replace(netloc=netloc))

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that database access is configured.
        When:  Called during app startup (lifespan).
        How:   Collects problems and raises ValueError with guidance.
        """
        errors = []
        if not self.mongodb_uri:
            if bool(self.db_user) != bool(self.db_pass):
                errors.append("DB_USER and DB_PASS must be set together")
            elif not self.db_user:
                errors.append(
                    "Neither MONGODB_URI nor DB_USER/DB_PASS is set. "
                    "Falling back to mongodb://localhost:27017"
                )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Singleton instance — imported throughout the application
settings = Settings()
