"""
Configuration management for the Postboard backend
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Document store
    mongo_url: str = "mongodb://localhost:27017"
    mongo_database: str = "postboard"
    mongo_server_selection_timeout_ms: int = 5000
    users_collection: str = "users"
    posts_collection: str = "posts"
    comments_collection: str = "comments"

    # Passwords
    password_hasher: str = "scrypt"  # 'scrypt', 'sha256'

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8088
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="POSTBOARD_", case_sensitive=False
    )


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        mongo_database=settings.mongo_database,
        environment=settings.environment,
    )
