"""Configuration for the chat service using Pydantic settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the repo root (two levels up from this file)
REPO_ROOT = Path(__file__).parent.parent.parent
ENV_FILE = REPO_ROOT / ".env"


class Settings(BaseSettings):
    """Chat service settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Model provider (OpenAI-compatible endpoint)
    openai_api_base: str = Field(
        default="https://api.openai.com/v1",
        description="Base URL of the OpenAI-compatible chat completions API",
    )
    openai_api_key: str = Field(
        default="",
        description="API key for the model provider",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="Chat model used to answer questions",
    )

    # Generation settings
    chat_temperature: float = Field(
        default=0.3,
        description="Sampling temperature for answers",
    )
    chat_max_tokens: int = Field(
        default=1024,
        description="Max output tokens per answer",
    )
    chat_timeout_seconds: float = Field(
        default=60.0,
        description="Timeout for a single model call",
    )

    # Web server
    host: str = Field(
        default="127.0.0.1",
        description="Interface to bind the HTTP server to",
    )
    port: int = Field(
        default=8000,
        description="Port for the HTTP server",
    )
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Return CORS origins as a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


def get_settings() -> Settings:
    """Create and return settings instance."""
    return Settings()
