"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-decision-engine"
    log_level: str = "INFO"

    # Fixed demo personal codes with preassigned credit segments
    segment_overrides_enabled: bool = True


settings = Settings()
