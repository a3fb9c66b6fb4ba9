"""
Settings Schemas
================
Pydantic models for matching settings validation.
"""

from typing import Any, Literal, Optional
from pydantic import BaseModel, Field
from enum import Enum


class SettingType(str, Enum):
    """Supported setting value types."""
    STRING = "string"
    NUMBER = "number"
    ENUM = "enum"


class SettingDefinition(BaseModel):
    """Definition of a setting including its constraints."""
    key: str
    label: str
    description: str
    value_type: SettingType
    default_value: Any
    env_var: str
    options: Optional[list] = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None


class MatchingSettings(BaseModel):
    """Validated settings for typo detection and suggestions."""
    typo_max_distance: int = Field(
        2, ge=0, le=10, description="Largest edit distance reported as a typo"
    )
    suggestion_max_results: int = Field(
        3, ge=1, le=50, description="Maximum number of ranked suggestions"
    )
    suggestion_max_distance: int = Field(
        3, ge=0, le=10, description="Largest edit distance offered as a suggestion"
    )
    default_dialect: Literal["sql", "query_builder", "model_access"] = Field(
        "query_builder", description="Reserved-word preset for new detectors"
    )
