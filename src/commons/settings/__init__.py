"""Settings management module."""

from src.commons.settings.loader import SettingsLoader, get_settings, reset_settings
from src.commons.settings.models import (
    API_KEY_ENV_VAR,
    DEFAULT_BASE_URL,
    AppSettings,
    Settings,
    TelemetrySettings,
    TwelveLabsSettings,
)

__all__ = [
    # Loader
    "SettingsLoader",
    "get_settings",
    "reset_settings",
    # Models
    "Settings",
    "AppSettings",
    "TwelveLabsSettings",
    "TelemetrySettings",
    # Constants
    "API_KEY_ENV_VAR",
    "DEFAULT_BASE_URL",
]
