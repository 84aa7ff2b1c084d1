"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "ContractLens - Contract Summary Service"
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Display formatting (strftime patterns)
    DATE_DISPLAY_FORMAT: str = "%B %d, %Y"
    DATE_RANGE_FORMAT: str = "%b %d, %Y"

    # Report
    TIMELINE_PREVIEW_LIMIT: int = 5

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


# Global settings instance
settings = Settings()
