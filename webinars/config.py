"""Configuration management using environment variables"""
import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./webinars.db"


class Settings:
    """Application settings - YAGNI: Only what we need right now"""

    def __init__(self):
        # Environment
        self.environment = os.getenv("ENVIRONMENT", "development")

        # Database configuration
        if self.environment == "production":
            self.database_url = self._get_required("DATABASE_URL")
        else:
            self.database_url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
            if self.database_url == DEFAULT_DATABASE_URL:
                logging.getLogger(__name__).debug(
                    "Using default local SQLite database ./webinars.db"
                )

        # Server configuration
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", "8000"))

        # CORS origins (comma-separated list)
        self.cors_origins = os.getenv("CORS_ORIGINS", "")

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def cors_origin_list(self) -> list:
        """CORS origins as a list, empty entries dropped"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def _get_required(self, key: str) -> str:
        """Get required environment variable or raise error."""
        value = os.getenv(key, "").strip()
        if not value:
            raise ValueError(
                f"Missing required environment variable: {key}. "
                f"Required in production mode."
            )
        return value


# Global settings instance
settings = Settings()
