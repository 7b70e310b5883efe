"""Config – grid defaults, loaders and configuration errors."""

from mp_grid.config.settings import EnvSettingsLoader, GridSettings, Settings, SettingsLoader
from mp_grid.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "GridSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
