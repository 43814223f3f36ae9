from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"

    # Canned completion
    completion_model: str = "gpt-3.5-turbo"
    completion_tokens: int = Field(default=100, ge=0)
    reply_suffix: str = "Hello, how can I help you today?"

    # Streaming
    stream_chunks: int = Field(default=10, ge=0)
    stream_interval: float = Field(default=1.0, ge=0.0)  # seconds

    id_strategy: Literal["uuid", "random"] = "uuid"


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings."""
    return settings
