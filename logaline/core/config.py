"""Application configuration using pydantic-settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Log A Line"
    debug: bool = False

    # Draft store
    data_dir: str = Field(default="data")
    store_name: str = Field(default="LogALineDB")
    store_version: int = Field(default=1, description="Schema version created on first open")

    # Drafts
    source_key_suffix: str = Field(
        default="--src",
        description="Appended to the document key for a source's raw text",
    )

    @property
    def store_path(self) -> Path:
        """Get the draft store file as a Path object."""
        return Path(self.data_dir) / f"{self.store_name}.db"

settings = Settings()
