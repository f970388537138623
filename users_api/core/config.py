# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults,
    except the database connection string which has no default.
    """
    
    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()
        
        # Database Configuration
        self.database_url: Final[str] = os.getenv("DATABASE_URL", "")
        self.database_name: Final[str] = os.getenv("DB_NAME", "ryde")
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")
        
        # Deadline applied to every store round-trip made on behalf of a request
        self.request_timeout_seconds: Final[float] = float(
            os.getenv("REQUEST_TIMEOUT_SECONDS", "10")
        )
        
        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        
        # HTTP listener (fixed)
        self.api_prefix: Final[str] = "/apis"
        self.host: Final[str] = "0.0.0.0"
        self.port: Final[int] = 8080


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
