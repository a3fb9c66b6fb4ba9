"""
Settings Service
================
Loads matching settings from the environment and validates them.
"""

import os
import logging
from typing import Any, Dict, Mapping, Optional

from .defaults import SETTING_DEFINITIONS, get_default_values
from .schemas import MatchingSettings, SettingType

logger = logging.getLogger(__name__)

# Global settings instance
_settings: Optional[MatchingSettings] = None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> MatchingSettings:
    """Build settings from defaults overridden by SQLTYPO_* variables.

    Args:
        environ: Variables to read (defaults to os.environ)

    Returns:
        Validated MatchingSettings

    Raises:
        ValueError: If a value is not a number, out of range or not an option
    """
    environ = os.environ if environ is None else environ
    values: Dict[str, Any] = get_default_values()

    for definition in SETTING_DEFINITIONS:
        raw = environ.get(definition.env_var)
        if raw is None or raw.strip() == "":
            continue

        value = _parse_value(raw.strip(), definition)
        _validate_value(value, definition)
        values[definition.key] = value
        logger.debug(f"Setting {definition.key} overridden by {definition.env_var}")

    return MatchingSettings(**values)


def get_settings() -> MatchingSettings:
    """Get or load the global settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
        logger.info(f"Loaded matching settings: {_settings.model_dump()}")
    return _settings


def reset_settings() -> None:
    """Forget the loaded settings so the next get_settings() re-reads them."""
    global _settings
    _settings = None


def _parse_value(raw: str, definition) -> Any:
    """Convert an environment string to the definition's value type."""
    if definition.value_type == SettingType.NUMBER:
        try:
            return int(raw)
        except ValueError:
            return raw
    if definition.value_type == SettingType.ENUM:
        return raw.lower()
    return raw


def _validate_value(value: Any, definition) -> None:
    """Validate a value against its definition.

    Raises:
        ValueError: If validation fails
    """
    value_type = definition.value_type

    if value_type == SettingType.STRING:
        if not isinstance(value, str):
            raise ValueError(f"{definition.key}: must be a string")

    elif value_type == SettingType.NUMBER:
        if not isinstance(value, (int, float)):
            raise ValueError(f"{definition.key}: must be a number")
        if definition.min_value is not None and value < definition.min_value:
            raise ValueError(f"{definition.key}: must be at least {definition.min_value}")
        if definition.max_value is not None and value > definition.max_value:
            raise ValueError(f"{definition.key}: must be at most {definition.max_value}")

    elif value_type == SettingType.ENUM:
        if definition.options and value not in definition.options:
            raise ValueError(f"{definition.key}: must be one of {definition.options}")
