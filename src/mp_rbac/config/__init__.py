"""Config – 12-factor settings for the authorization layer."""

from mp_rbac.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RbacSettings,
    Settings,
    SettingsLoader,
)
from mp_rbac.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RbacSettings",
    "Settings",
    "SettingsLoader",
]
