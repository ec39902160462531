# src/suitediff/cli/compare_cmds.py

import sys
from pathlib import Path

import click
import structlog

from suitediff.cli.utils import (
    config_from_options,
    inventory_options,
    logging_options,
    setup_logging_from_context,
)
from suitediff.exceptions import SuitediffError
from suitediff.report import MarkdownReport
from suitediff.runtime import CompareOrchestrator
from suitediff.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.compare")

EXIT_TESTS_REMOVED = 3


@click.command(name="compare")
@inventory_options
@click.option(
    "-b",
    "--baseline",
    default=None,
    envvar="SUITEDIFF_BASELINE",
    show_envvar=True,
    help="Git revision to compare against. [default: HEAD^]",
)
@click.option(
    "--suite-list-threshold",
    type=click.IntRange(min=1),
    default=None,
    help="List suites only when there are more tests than this. [default: 900]",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the markdown report to this file instead of stdout.",
)
@click.option(
    "--fail-on-missing",
    is_flag=True,
    default=False,
    help=f"Exit with code {EXIT_TESTS_REMOVED} when tests were removed.",
)
@logging_options
@click.pass_context
def compare_cli(
    ctx: click.Context,
    output: Path | None,
    fail_on_missing: bool,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
    **options,
):
    """Compare the test inventory of the working tree with a baseline revision."""
    try:
        config = config_from_options(ctx, **options)
    except SuitediffError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    setup_logging_from_context(
        ctx,
        local_log_level=log_level,
        local_log_file=log_file,
        local_json_logs=json_logs,
        default_log_level=config.global_config.log_level,
    )

    try:
        log.info("Executing 'compare' command", tests=config.compare.tests, root=str(config.compare.root))
        report = CompareOrchestrator(config.compare).run()
    except SuitediffError as e:
        log.error("Comparison failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    except Exception as e:
        log.critical("An unexpected error occurred during 'compare'", error=str(e), exc_info=True)
        click.echo(f"Error: An unexpected issue occurred: {e}", err=True)
        ctx.exit(2)

    markdown = MarkdownReport.from_report(report).render()
    if output:
        output.write_text(markdown, encoding="utf-8")
        log.info("Report written", path=str(output))
    else:
        click.echo(markdown)

    click.echo(report.summary_line(), err=True)
    click.echo(f"Total {report.total_tests} tests", err=True)

    if fail_on_missing and report.missing_count:
        sys.exit(EXIT_TESTS_REMOVED)

# 🧪⚙️
