"""
Application configuration management.
"""
from typing import List, Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        env_ignore_empty=True
    )
    
    # Application info
    APP_NAME: str = Field(default="Perf Utils", description="Application name")
    VERSION: str = Field(default="0.1.0", description="Application version")
    ENV: Literal["dev", "prod"] = Field(default="dev", description="Environment (dev/prod)")
    
    # API
    API_V1_STR: str = Field(default="/api/v1", description="API v1 prefix")
    HOST: str = Field(default="127.0.0.1", description="Host to bind")
    PORT: int = Field(default=8000, description="Port to bind")
    
    # CORS
    BACKEND_CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="List of allowed CORS origins"
    )
    
    # Instrumentation
    TRACK_REQUEST_TIMINGS: bool = Field(
        default=True,
        description="Record each HTTP request as a '<METHOD> <path>' measurement"
    )
    
    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(
        default="",
        description="Log format (empty for the default format with request/timer context)"
    )
    
    @property
    def DEBUG(self) -> bool:
        """Debug mode is enabled in dev environment."""
        return self.ENV == "dev"


settings = Settings()
