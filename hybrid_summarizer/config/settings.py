from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    summarizer_mode: str = "privacy_hybrid"
    plain_backend: str = "local"

    chunk_words: int = 500
    benchmark_interval: int = 5
    anonymized_preview_chars: int = 500
    benchmark_trace_memory: bool = False

    local_provider: str = "ollama"
    local_api_key: str = ""
    local_model_name: str = "llama3.2"
    local_base_url: str = ""
    local_timeout_seconds: int = 120
    local_temperature: float = 0.2

    cloud_provider: str = "openai"
    cloud_api_key: str = ""
    cloud_model_name: str = "gpt-4o-mini"
    cloud_base_url: str = ""
    cloud_timeout_seconds: int = 60
    cloud_temperature: float = 0.2
