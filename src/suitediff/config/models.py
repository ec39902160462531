#
# config/models.py
#
"""
Attrs-based data models for suitediff configuration structure.
"""

import logging
from pathlib import Path
from typing import Any

from attrs import define, field

DEFAULT_FRAMEWORK = "mocha"
DEFAULT_SUITE_LIST_THRESHOLD = 900


# --- Validators ---
def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    valid = logging._nameToLevel.keys()
    if value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


def _validate_positive_int(inst: Any, attr: Any, value: int) -> None:
    """Validator ensures integer is positive."""
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ValueError(f"Field '{attr.name}' must be positive integer, got {value}")


def _validate_pattern(inst: Any, attr: Any, value: str) -> None:
    if not value or not value.strip():
        raise ValueError("Field 'tests' must be a non-empty glob pattern.")


@define(frozen=True, slots=True)
class CompareConfig:
    """What to inventory and which revision to compare against."""
    tests: str = field(validator=_validate_pattern)
    framework: str = field(default=DEFAULT_FRAMEWORK)
    # Workspace root; file patterns and reported paths are relative to it.
    root: Path = field(factory=Path.cwd, converter=Path)
    baseline: str = field(default="HEAD^")
    include_file: bool = field(default=False)
    # Above this many tests the report lists suites only.
    suite_list_threshold: int = field(
        default=DEFAULT_SUITE_LIST_THRESHOLD, validator=_validate_positive_int
    )
    workers: int = field(default=1, validator=_validate_positive_int)


@define(frozen=True, slots=True)
class GlobalConfig:
    """Global default settings for suitediff."""
    log_level: str = field(default="WARNING", validator=_validate_log_level)

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


@define(frozen=True, slots=True)
class SuitediffConfig:
    """Root configuration object for the suitediff application."""
    compare: CompareConfig = field()
    global_config: GlobalConfig = field(factory=GlobalConfig, metadata={"toml_name": "global"})
    config_file_path: Path | None = field(default=None)


# 🧪⚙️
