"""Configuration for batch path classification."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from detectlang.exceptions import ConfigError
from detectlang.languages import is_known_id

if TYPE_CHECKING:
    from collections.abc import Mapping


class DetectlangConfig(BaseModel):
    """Options for classify_paths().

    Lookups themselves are not configurable; the extension table is fixed.
    """

    model_config = {"extra": "ignore", "frozen": True}

    exclude_languages: list[str] = Field(
        default_factory=list,
        description="Language ids to set aside when classifying paths",
    )
    ignore_hidden_files: bool = Field(default=False, description="Skip files whose name starts with a dot")

    @field_validator("exclude_languages")
    @classmethod
    def validate_language_ids(cls, value: list[str]) -> list[str]:
        """Normalize ids to lowercase and reject ids missing from the table."""
        normalized = [language_id.strip().lower() for language_id in value]
        unknown = [language_id for language_id in normalized if not is_known_id(language_id)]
        if unknown:
            msg = f"unknown language id: {', '.join(unknown)}"
            raise ValueError(msg)
        return normalized


def parse_config(data: Mapping[str, Any]) -> DetectlangConfig:
    """Build a DetectlangConfig from settings the host application already holds.

    Args:
        data: Plain mapping of option names to values. Unknown keys are ignored.

    Returns:
        Validated DetectlangConfig.

    Raises:
        ConfigError: If a value has the wrong type or names an unknown language id.
    """
    try:
        return DetectlangConfig(**data)
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        msg = f"Invalid config value for '{field}': {first_error['msg']}"
        raise ConfigError(msg) from e
