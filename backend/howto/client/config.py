"""Client-side settings (backend URL, local storage file)."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HOWTO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_url: str = "http://localhost:8080"
    storage_path: Path = Path.home() / ".howto" / "storage.json"
    timeout_seconds: float = 60.0
