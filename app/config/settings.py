from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    mongodb_uri: str = ""
    mongodb_database: str = "innovantaDB"
    mongodb_collection: str = "analysisReports"
    mongodb_timeout_ms: int = 10000

    generation_provider: str = "gemini"
    system_prompt_path: Path | None = None

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-1.5-flash"

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 60
