from typing import List

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./kanban.db"
    ENV: str = "local"  # Environment setting
    SQL_ECHO: bool = False

    # API
    API_PREFIX: str = "/api"
    CORS_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Create missing tables on startup (alembic handles real deployments)
    AUTO_CREATE_TABLES: bool = True

    # Server
    HOST: str = "localhost"
    PORT: int = 8000

    @property
    def cors_origins_list(self) -> List[str]:
        """Return the configured CORS origins as a sanitized list."""

        if not self.CORS_ORIGINS:
            return []

        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"

settings = Settings()
