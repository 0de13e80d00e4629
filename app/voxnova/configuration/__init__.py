"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance
    Settings: Settings class (for testing/overrides)
"""

from voxnova.configuration.settings import Settings

settings = Settings()

__all__ = ["Settings", "settings"]
