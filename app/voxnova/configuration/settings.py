"""Voxnova configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-level settings for the Voxnova runtime.

    Only ambient concerns live here. The translation engine itself is
    configured per instance through ``voxnova.i18n.I18nConfig``.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        VOXNOVA_ENVIRONMENT: Deployment environment name (default: development)

    Example:
        ```python
        from voxnova.configuration import settings

        if settings.is_production:
            # JSON logs...
        ```
    """

    LOG_LEVEL: str = Field(default="INFO", alias="LOG_LEVEL")
    ENVIRONMENT: str = Field(default="development", alias="VOXNOVA_ENVIRONMENT")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"
