# Defines application-wide settings using pydantic-settings' BaseSettings
# Manages environment variables for various aspects of the application:
# API configuration (prefix, project name)
# Security settings (secret key, JWT algorithm, optional token lifetime)
# Database connection details
# Validation limits for registration


import json
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Bloglist API"
    VERSION: str = "0.1.0"

    # Security
    SECRET_KEY: str = os.getenv("SECRET_KEY", "development_secret_key")
    ALGORITHM: str = "HS256"
    # Tokens carry no expiry unless this is set
    ACCESS_TOKEN_EXPIRE_MINUTES: Optional[int] = None

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./bloglist.db")

    # CORS, comma separated or a JSON list
    BACKEND_CORS_ORIGINS: str = "*"

    # Registration limits
    USERNAME_MIN_LENGTH: int = 3
    PASSWORD_MIN_LENGTH: int = 3

    # Development settings - set these differently in production
    DEBUG: bool = os.getenv("DEBUG", "False").lower() in ["true", "1", "t"]
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")

    @property
    def cors_origins(self) -> List[str]:
        value = self.BACKEND_CORS_ORIGINS.strip()
        if value.startswith("["):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                return []
        return [origin.strip() for origin in value.split(",") if origin.strip()]

# Create settings instance
settings = Settings()
