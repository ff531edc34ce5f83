from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Pydantic Settings automatically reads env vars matching field names (case-insensitive).
    In development, it also reads from .env file if present.
    """

    app_name: str = "txproxy"

    # Name of the downstream transaction server as shown to API callers
    # when it cannot be reached
    downstream_service_name: str = "CICS Service"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


settings = Settings()
