"""Application configuration with environment variables."""
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Database
    DATABASE_URL: str = "sqlite:///./database.sqlite"
    
    # Password hashing
    BCRYPT_ROUNDS: int = 10
    
    # Application
    APP_NAME: str = "Signup API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = True
    
    # Localization
    DEFAULT_LANGUAGE: Literal["en", "kr"] = "en"
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "default"  # or json
    
    # CORS
    CORS_ORIGINS: list[str] = ["*"]
    
    class Config:
        env_file = ".env"
        case_sensitive = True


# Create global settings instance
settings = Settings()
