# Standard library imports
import os
from typing import Final, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    The MongoDB connection string is the only required setting; everything
    else has a sensible default.
    """

    def __init__(self) -> None:
        # Database Configuration
        # ATLAS_URL is accepted for deployments that still export the older name
        self.mongo_uri: Final[Optional[str]] = os.getenv("MONGO_URI") or os.getenv("ATLAS_URL")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "registration")
        self.users_collection_name: Final[str] = os.getenv("MONGO_USERS_COLLECTION", "users")
        self.mongo_server_selection_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
        )

        # Password hashing
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))

        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
