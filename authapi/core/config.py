"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT = "development"
PRODUCTION = "production"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        app_name: Display name for the API (``APP_NAME``).
        version: Current API version string.
        environment: Deployment environment (``NODE_ENV``).
            ``development`` enables verbose error bodies and the docs UI.
        port: Listen port for the bundled server (``PORT``).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        mongo_uri: Datastore connection string. Unset means in-memory users.
        mongo_db: Database name used on the Mongo server.
        prod_url: Public URL of the production deployment.
        whitelist_origins: Origins allowed by CORS outside development.
        bcrypt_rounds: Cost factor for password hashing.
        rate_limit_default: Global rate limit applied to every route.
        rate_limit_enabled: Switch for the global rate limiter.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = "Blog API"
    version: str = "1.0.0"
    environment: str = Field(
        default=PRODUCTION,
        validation_alias=AliasChoices("NODE_ENV", "ENVIRONMENT", "environment"),
    )
    port: int = 3000
    log_level: str = "INFO"

    mongo_uri: Optional[str] = None
    mongo_db: str = "blog-db"
    prod_url: Optional[str] = None
    whitelist_origins: list[str] = Field(default_factory=list)

    bcrypt_rounds: int = Field(default=10, ge=4, le=31)
    rate_limit_default: str = "60/minute"
    rate_limit_enabled: bool = True

    @property
    def is_development(self) -> bool:
        """True when verbose, development-only behaviour is enabled."""
        return self.environment.lower() == DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == PRODUCTION


settings = Settings()
