"""Configuration settings for the client."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings."""

    model_config = SettingsConfigDict(
        env_prefix="FINANCE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Finance Freedom"
    debug: bool = False
    base_url: str = "http://localhost:3000/api/"
    request_timeout: float = 30.0

    # Persisted token (application-private key-value store)
    token_store_path: str = "financefreedom.db"
    prefs_name: str = "finance_freedom_prefs"
    token_key: str = "access_token"


settings = Settings()
