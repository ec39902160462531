# src/suitediff/cli/utils.py

import logging
from pathlib import Path
from typing import Any

import click
import structlog

from suitediff.config import GlobalConfig, SuitediffConfig, load_config
from suitediff.telemetry.logger import setup_logging as core_setup_logging

log = structlog.get_logger("cli.utils")

LOG_LEVEL_CHOICES = click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False)


def logging_options(f):
    """Decorator to add logging options to any command."""
    f = click.option(
        "-l",
        "--log-level",
        type=LOG_LEVEL_CHOICES,
        default=None,
        envvar="SUITEDIFF_LOG_LEVEL",
        help="Set the logging level (overrides config file).",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="SUITEDIFF_LOG_FILE",
        help="Path to write logs to a file (JSON format).",
    )(f)
    f = click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="SUITEDIFF_JSON_LOGS",
        help="Output console logs as JSON.",
    )(f)
    return f


def inventory_options(f):
    """Decorator to add the options that select and parse test files."""
    f = click.option(
        "-c",
        "--config-path",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
        default=None,
        envvar="SUITEDIFF_CONF",
        show_envvar=True,
        help="Path to a suitediff TOML configuration file.",
    )(f)
    f = click.option(
        "-t",
        "--tests",
        default=None,
        envvar="SUITEDIFF_TESTS",
        show_envvar=True,
        help="Glob pattern of test files, relative to the root (e.g. 'tests/**/*.spec.js').",
    )(f)
    f = click.option(
        "-f",
        "--framework",
        default=None,
        envvar="SUITEDIFF_FRAMEWORK",
        show_envvar=True,
        help="Test framework: mocha, cypress, jest, jasmine, codeceptjs. [default: mocha]",
    )(f)
    f = click.option(
        "-r",
        "--root",
        type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
        default=None,
        envvar=["SUITEDIFF_ROOT", "GITHUB_WORKSPACE"],
        help="Workspace root the pattern and reported paths are relative to. [default: cwd]",
    )(f)
    f = click.option(
        "--include-file/--no-include-file",
        default=None,
        help="Prefix every test name with its file path.",
    )(f)
    f = click.option(
        "-j",
        "--workers",
        type=click.IntRange(min=1),
        default=None,
        help="Number of threads parsing files. [default: 1]",
    )(f)
    return f


def config_from_options(ctx: click.Context, **options: Any) -> SuitediffConfig:
    """Merges the config file with CLI options; ConfigurationError propagates."""
    config_path = options.pop("config_path", None)
    overrides = {key: value for key, value in options.items() if value is not None}
    log_level = (ctx.obj or {}).get("LOG_LEVEL")
    if log_level:
        overrides.setdefault("log_level", log_level)
    return load_config(config_path, **overrides)


def setup_logging_from_context(
    ctx: click.Context,
    local_log_level: str | None = None,
    local_log_file: str | None = None,
    local_json_logs: bool | None = None,
    default_log_level: str = "WARNING",
) -> None:
    """
    Setup logging using context values, allowing local overrides.
    """
    obj = ctx.obj or {}
    log_level_str = local_log_level or obj.get("LOG_LEVEL") or default_log_level
    log_file_path = local_log_file or obj.get("LOG_FILE")
    use_json_logs = local_json_logs if local_json_logs is not None else obj.get("JSON_LOGS", False)

    try:
        numeric_level = GlobalConfig(log_level=log_level_str).numeric_log_level
    except ValueError:
        numeric_level = logging.WARNING
        log_level_str = "WARNING"

    core_setup_logging(
        level=numeric_level,
        json_logs=use_json_logs,
        log_file=log_file_path,
    )

    log.debug(
        "CLI logging initialized via utils",
        level=log_level_str,
        file=log_file_path or "console",
        json=use_json_logs,
    )

# ⚙️🛠️
