"""Application configuration"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # API
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Blog CRUD API"
    SERVICE_NAME: str = "blog-crud-api"
    VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Database
    # WHY: SQLite keeps the demo self-contained; point this at PostgreSQL
    # (postgresql://...) for anything shared.
    DATABASE_URL: str = "sqlite+aiosqlite:///./blog_api.db"

    # Seed users/posts/comments on startup when the users table is empty
    SEED_SAMPLE_DATA: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # CORS
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:8080",
    ]

    @property
    def async_database_url(self) -> str:
        """Get async database URL"""
        return self.DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://")

    @property
    def is_sqlite(self) -> bool:
        """True when the configured database is SQLite (no server-side pool)."""
        return self.async_database_url.startswith("sqlite")


settings = Settings()
