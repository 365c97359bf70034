"""Runtime settings loaded from SIR_TRACKER_* environment variables."""
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STORAGE_PATH = Path.home() / ".sir_tracker" / "storage.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SIR_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    storage_path: Path = DEFAULT_STORAGE_PATH
    log_level: str = "WARNING"
    log_json: bool = False


def get_settings() -> Settings:
    return Settings()
