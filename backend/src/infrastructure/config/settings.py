"""Application settings using Pydantic Settings for type-safe configuration."""

from functools import lru_cache
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    All settings are type-safe and validated by Pydantic.
    """
    
    # Application
    app_name: str = "Haus - Property Listings"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    
    # API
    api_v1_prefix: str = "/api/v1"
    cors_origins: list[str] = ["http://localhost:8081", "http://localhost:19006"]
    
    # Database (durable key-value storage)
    database_url: str = "sqlite+aiosqlite:///./haus.db"
    database_echo: bool = False
    
    # Catalog
    catalog_path: Path = Path("data/properties.json")
    featured_limit: int = Field(default=3, ge=0)
    
    # Favorites
    favorites_storage_key: str = "favorites"
    favorites_write_attempts: int = Field(default=3, ge=1)
    favorites_retry_delay: float = Field(default=0.2, ge=0)
    
    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"
    
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    
    Returns:
        Singleton Settings instance
    """
    return Settings()
