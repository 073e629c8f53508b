"""
Configuration management for the Content Review Hub.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Application
    app_name: str = Field(default="Content Review Hub")
    debug: bool = Field(default=False)
    environment: str = Field(default="development")

    # API
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)
    api_workers: int = Field(default=1)

    # Database
    database_url: str = Field(default="sqlite:///./content_review_hub.db")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json", description="'json' or 'console'")

    # Review workflow
    seed_demo_assets: bool = Field(
        default=True,
        description="Persist the demonstration assets for users with none stored",
    )
    default_reviewer_name: str = Field(
        default="Reviewer",
        description="Reviewer name stamped on a lens when none is known",
    )
    default_author_name: str = Field(
        default="You",
        description="Display name used when the identity carries no email",
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings
