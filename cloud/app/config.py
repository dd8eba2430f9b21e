"""Application configuration and settings."""

from pathlib import Path
from typing import Set

from pydantic_settings import BaseSettings

from inkjournal.config import RecognitionConfig, SmoothingConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    api_keys: str = ""  # Comma-separated valid API keys
    cors_origins: str = "*"  # Comma-separated allowed origins

    # Storage
    storage_dir: Path = Path("/tmp/inkjournal")

    # Notes
    smoothing_enabled: bool = True
    smoothing_window: int = 4
    max_strokes: int = 2000

    # Recognition
    recognition_enabled: bool = False
    recognition_url: str = RecognitionConfig.url
    recognition_language: str = "en"
    recognition_timeout: float = 10.0

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        env_prefix = "INKJOURNAL_"
        env_file = ".env"
        env_file_encoding = "utf-8"

    def get_valid_api_keys(self) -> Set[str]:
        """Parse and return valid API keys as a set."""
        if not self.api_keys:
            return set()
        return {key.strip() for key in self.api_keys.split(",") if key.strip()}

    def get_cors_origins(self) -> list[str]:
        """Parse and return CORS origins."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def smoothing_config(self) -> SmoothingConfig:
        return SmoothingConfig(enabled=self.smoothing_enabled, window_size=self.smoothing_window)

    def recognition_config(self) -> RecognitionConfig:
        return RecognitionConfig(
            enabled=self.recognition_enabled,
            url=self.recognition_url,
            language=self.recognition_language,
            timeout=self.recognition_timeout,
        )


# Global settings instance
settings = Settings()
