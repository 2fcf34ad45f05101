"""Application configuration using Pydantic Settings."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # MongoDB (transactions require a replica set)
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_db_name: str = "learning_tracker"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 5001
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "http://localhost:3000,http://localhost:5001"

    # Quick-add
    quick_add_default_month: int = 1

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",")]


settings = Settings()
