# sqltypo Settings Module
"""
Settings for typo detection and suggestions.
Values come from defaults and SQLTYPO_* environment variables.
"""

from .schemas import (
    SettingType,
    SettingDefinition,
    MatchingSettings,
)
from .defaults import SETTING_DEFINITIONS, get_default_values
from .service import load_settings, get_settings, reset_settings

__all__ = [
    "SettingType",
    "SettingDefinition",
    "MatchingSettings",
    "SETTING_DEFINITIONS",
    "get_default_values",
    "load_settings",
    "get_settings",
    "reset_settings",
]
