#
# config/loader.py
#
"""
Loads suitediff configuration from an optional TOML file plus overrides.
"""

import tomllib
from pathlib import Path
from typing import Any

import attrs
import structlog

from suitediff.config.models import CompareConfig, GlobalConfig, SuitediffConfig
from suitediff.exceptions import ConfigurationError

log = structlog.get_logger("config.loader")

COMPARE_KEYS = {field.name for field in attrs.fields(CompareConfig)}
GLOBAL_KEYS = {field.name for field in attrs.fields(GlobalConfig)}


def _read_toml(config_path: Path) -> dict[str, Any]:
    try:
        with config_path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: '{config_path}'") from e
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Could not read configuration '{config_path}': {e}") from e


def _section(data: dict[str, Any], name: str, allowed: set[str]) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigurationError(f"Section [{name}] must be a table.")
    unknown = set(section) - allowed
    if unknown:
        raise ConfigurationError(
            f"Unknown keys in [{name}]: {sorted(unknown)}. Allowed: {sorted(allowed)}"
        )
    return dict(section)


def load_config(config_path: Path | None = None, **overrides: Any) -> SuitediffConfig:
    """
    Builds the configuration.

    Precedence: explicit overrides (CLI options and environment variables,
    ignored when None) > config file > defaults. A relative `root` in the
    config file is resolved against the file's directory.

    Raises:
        ConfigurationError: the file is unreadable or a value is invalid.
    """
    data: dict[str, Any] = {}
    if config_path is not None:
        data = _read_toml(config_path)
        log.debug("Read configuration file", path=str(config_path))

    compare_values = _section(data, "compare", COMPARE_KEYS)
    global_values = _section(data, "global", GLOBAL_KEYS)

    if config_path is not None and "root" in compare_values:
        compare_values["root"] = config_path.parent / compare_values["root"]

    for key, value in overrides.items():
        if value is None:
            continue
        if key in COMPARE_KEYS:
            compare_values[key] = value
        elif key in GLOBAL_KEYS:
            global_values[key] = value
        else:
            raise ConfigurationError(f"Unknown configuration option '{key}'")

    if "tests" not in compare_values:
        raise ConfigurationError(
            "No test file pattern configured. Pass --tests or set 'tests' in [compare]."
        )

    try:
        config = SuitediffConfig(
            compare=CompareConfig(**compare_values),
            global_config=GlobalConfig(**global_values),
            config_file_path=config_path,
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    log.debug(
        "Configuration loaded",
        tests=config.compare.tests,
        framework=config.compare.framework,
        root=str(config.compare.root),
        baseline=config.compare.baseline,
    )
    return config


# 🧪⚙️
