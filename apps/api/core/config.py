"""
Centralized configuration management with validation.

All environment variables are loaded and validated here.
The plan engine itself is configuration-free; only the HTTP shell reads settings
and passes the relevant values into the engine.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    """Application settings with validation."""
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )
    
    # API Configuration
    APP_NAME: str = Field(default="Plan Engine API")
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000)
    API_RELOAD: bool = Field(default=False)
    
    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="json")  # json or text
    
    # Environment
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)
    
    # CORS - comma-separated list of allowed origins for production
    CORS_ORIGINS: Optional[str] = Field(default=None)
    
    # Plan defaults
    # Inclusive length of a fresh subscription window (start + N-1 days).
    SUBSCRIPTION_WINDOW_DAYS: int = Field(default=30, ge=1, le=366)
    # How many profile snapshots the profile screen shows. Storage keeps all of them.
    PROFILE_HISTORY_DISPLAY_LIMIT: int = Field(default=5, ge=1)
    
    # Sentry Error Tracking
    SENTRY_DSN: Optional[str] = Field(default=None)
    SENTRY_TRACES_SAMPLE_RATE: float = Field(default=0.05)

    def cors_origin_list(self) -> List[str]:
        if not self.CORS_ORIGINS:
            return ["http://localhost:8081", "http://localhost:19006"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
