from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    analysis_provider: str = "http"
    analysis_base_url: str = "http://localhost:3000"
    analysis_endpoint_path: str = "/api/ai"
    analysis_timeout_seconds: float | None = None

    failure_message: str = "An error occurred during analysis. Please try again."
    preview_zoom: float = 1.5
