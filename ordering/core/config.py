"""
Application configuration.

Loads settings from environment variables and .env file.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

ORDER_STORE_MEMORY = "memory"
ORDER_STORE_SQL = "sql"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        order_store: Which order repository to wire ("memory" or "sql").
        database_url: SQLAlchemy URL, required when order_store is "sql".
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Ordering"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    order_store: str = ORDER_STORE_MEMORY
    database_url: Optional[str] = None

    def get_database_url(self) -> str:
        """Return the configured database URL or fail loudly."""
        if not self.database_url:
            raise ValueError("DATABASE_URL environment variable not set")
        return self.database_url


settings = Settings()
