"""Config settings – 12-factor env-based configuration."""
from mp_grid.config.settings.base import GridSettings, Settings
from mp_grid.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "GridSettings", "Settings", "SettingsLoader"]
