"""
Settings Defaults
=================
Default values and definitions for matching settings.
"""

from typing import Any, Dict, List
from .schemas import SettingDefinition, SettingType


SETTING_DEFINITIONS: List[SettingDefinition] = [
    SettingDefinition(
        key="typo_max_distance",
        label="Typo Max Distance",
        description="Largest edit distance at which a token is reported as a typo",
        value_type=SettingType.NUMBER,
        default_value=2,
        env_var="SQLTYPO_TYPO_MAX_DISTANCE",
        min_value=0,
        max_value=10,
    ),
    SettingDefinition(
        key="suggestion_max_results",
        label="Suggestion Count",
        description="Maximum number of 'did you mean' suggestions",
        value_type=SettingType.NUMBER,
        default_value=3,
        env_var="SQLTYPO_SUGGESTION_MAX_RESULTS",
        min_value=1,
        max_value=50,
    ),
    SettingDefinition(
        key="suggestion_max_distance",
        label="Suggestion Max Distance",
        description="Largest edit distance offered as a suggestion",
        value_type=SettingType.NUMBER,
        default_value=3,
        env_var="SQLTYPO_SUGGESTION_MAX_DISTANCE",
        min_value=0,
        max_value=10,
    ),
    SettingDefinition(
        key="default_dialect",
        label="Default Dialect",
        description="Reserved-word preset used when no dialect is given",
        value_type=SettingType.ENUM,
        default_value="query_builder",
        env_var="SQLTYPO_DEFAULT_DIALECT",
        options=["sql", "query_builder", "model_access"],
    ),
]


def get_default_values() -> Dict[str, Any]:
    """Get all default values keyed by setting key."""
    return {d.key: d.default_value for d in SETTING_DEFINITIONS}
