"""Application configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 4444
    debug: bool = False

    # Port drivers call back on; handed to every launcher at construction
    driver_contact_port: int = 4444

    # Launcher settings
    launcher_terminate_timeout_seconds: float = 5.0

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "BD_"
        env_file = ".env"


settings = Settings()
