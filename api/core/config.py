from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App settings
    app_name: str = "Polaris"
    debug: bool = False
    log_level: str = "INFO"

    # Remote store (Supabase Postgres). Both values are required, otherwise
    # notes are kept in the local cache only.
    remote_store_url: str = ""
    remote_store_key: str = ""

    # Local cache file (always available)
    local_cache_path: str = ".polaris_local_cache.json"

    # Notes
    save_ack_seconds: float = 3.0
    question_max_chars: int = 250

    # LLM API Keys (optional, the assistant falls back to a fixed reply without one)
    openai_api_key: str = ""
    anthropic_api_key: str = ""
    assistant_model: str = ""
    assistant_temperature: float = 0.1

    # Streamlit client
    api_url: str = "http://localhost:8000"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def remote_store_configured(self) -> bool:
        return bool(self.remote_store_url and self.remote_store_key)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
