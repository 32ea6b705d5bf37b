"""Configuration management using Pydantic Settings"""

from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Signal source
    signal_provider: Literal["mock", "http"] = "mock"
    signal_provider_url: str = "http://localhost:8001"
    mock_seed: int = 42

    # Trend jitter seed; unset means a fresh series on every request
    trend_seed: Optional[int] = None

    # Service
    service_name: str = "risk-galaxy"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0


settings = Settings()
