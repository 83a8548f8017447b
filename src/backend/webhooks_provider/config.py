"""Provider configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Provider settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Application
    app_name: str = "webhooks-provider"
    app_version: str = "0.1.0"
    debug: bool = False

    # Datadog API (DATADOG_API_KEY / DATADOG_APP_KEY env vars)
    datadog_api_key: str | None = None
    datadog_app_key: str | None = None
    datadog_api_url: str = "https://api.datadoghq.com/api/"

    # Transport timeout; the mutation guard itself never times out
    http_timeout_seconds: float = 30.0


settings = Settings()
