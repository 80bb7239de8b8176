"""Server configuration via environment variables and .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BRAVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Brave Search API
    api_key: str = ""  # BRAVE_API_KEY, required by the CLI
    api_base_url: str = "https://api.search.brave.com/res/v1"
    request_timeout: float = 30.0
    user_agent: str = "BraveSearchMCP/1.0"

    # Logging
    log_level: str = "INFO"

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key.strip())


settings = ServerSettings()
