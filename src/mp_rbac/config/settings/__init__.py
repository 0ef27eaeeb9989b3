"""Config settings – env-based configuration."""
from mp_rbac.config.settings.base import Settings
from mp_rbac.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from mp_rbac.config.settings.rbac import RbacSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "RbacSettings", "Settings", "SettingsLoader"]
