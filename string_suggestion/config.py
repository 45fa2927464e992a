"""
Configuration management using Pydantic Settings.
Loads configuration from environment variables and .env file.
"""
import string
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Suggestion Configuration
    SUGGESTION_ALPHABET: str = string.ascii_lowercase  # Letters used for substitutions and insertions
    SUGGESTION_DEFAULT_WEIGHT: int = Field(default=1, ge=0)  # Flat weight given to every plain word
    SUGGESTION_ENABLED: bool = True  # Load the word-list service at startup
    SUGGESTION_WORDLIST_PATH: str = "/app/data/dictionaries/words.txt"  # One word per line
    SUGGESTION_MIN_WORD_LENGTH: int = 2  # check_text skips words shorter than this

    # CORS Configuration
    CORS_ORIGINS: str = "*"

    # Development/Debug
    DEBUG: bool = False
    RELOAD: bool = False

    # Logging Configuration (Optional - per-module log levels)
    APP_LOG_LEVEL: Optional[str] = None
    UVICORN_LOG_LEVEL: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


# Global settings instance
settings = Settings()
