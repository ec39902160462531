# src/suitediff/cli/main.py

"""
Main CLI entry point for suitediff using Click.
Handles global options like logging level.
"""

from importlib.metadata import PackageNotFoundError, version

import click
import structlog

from suitediff.cli.compare_cmds import compare_cli
from suitediff.cli.config_cmds import config_cli
from suitediff.cli.list_cmds import list_cli
from suitediff.cli.utils import logging_options, setup_logging_from_context
from suitediff.telemetry import StructLogger

try:
    __version__ = version("suitediff")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = structlog.get_logger("cli.main")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="suitediff")
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    Suitediff: report which tests were added or removed between git revisions.

    Reads mocha/cypress/jest style and codeceptjs test files.
    Configuration precedence: CLI options > Environment Variables > Config File > Defaults.
    """
    ctx.ensure_object(dict)

    ctx.obj["LOG_LEVEL"] = log_level
    ctx.obj["LOG_FILE"] = log_file
    ctx.obj["JSON_LOGS"] = json_logs if json_logs is not None else False

    setup_logging_from_context(ctx, default_log_level="WARNING")
    log.debug(
        "Main CLI group initialized",
        log_level=log_level,
        log_file=log_file,
        json_logs=json_logs,
    )


cli.add_command(compare_cli)
cli.add_command(config_cli)
cli.add_command(list_cli)

if __name__ == "__main__":
    cli()

# 🖥️⚙️
