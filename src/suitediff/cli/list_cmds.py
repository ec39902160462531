# src/suitediff/cli/list_cmds.py

import click
import structlog
from rich.console import Console
from rich.tree import Tree

from suitediff.cli.utils import (
    config_from_options,
    inventory_options,
    logging_options,
    setup_logging_from_context,
)
from suitediff.decorator import SUITE_MARKER, HierarchicalDecorator
from suitediff.exceptions import SuitediffError
from suitediff.runtime import CompareOrchestrator
from suitediff.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.list")


def build_tree(decorator: HierarchicalDecorator, title: str) -> Tree:
    """Rich tree mirroring the suite tree; skipped entries are dimmed."""
    tree = Tree(title)
    pending = [(tree, decorator.root)]
    while pending:
        branch, node = pending.pop()
        for record in node.tests:
            if record.skipped or node.skip:
                branch.add(f"[dim strike]{record.name}[/]")
            else:
                branch.add(record.name)
        for child in node.children.values():
            style = "bold dim strike" if child.skip else "bold"
            pending.append((branch.add(f"{SUITE_MARKER} [{style}]{child.name}[/]"), child))
    return tree


@click.command(name="list")
@inventory_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["tree", "markdown", "names"], case_sensitive=False),
    default="tree",
    show_default=True,
    help="tree: rich tree, markdown: nested list, names: one full name per line.",
)
@logging_options
@click.pass_context
def list_cli(
    ctx: click.Context,
    output_format: str,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
    **options,
):
    """List the tests found in the working tree."""
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
        inventory = CompareOrchestrator(config.compare).inventory()
    except SuitediffError as e:
        log.error("Listing failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    output_format = output_format.lower()
    if output_format == "names":
        for name in inventory.snapshot.tests:
            click.echo(name)
    elif output_format == "markdown":
        click.echo(inventory.decorator.render_nested_list())
    else:
        title = (
            f"{inventory.decorator.count()} tests in {len(inventory.snapshot.files)} files "
            f"({len(inventory.snapshot.skipped)} skipped)"
        )
        Console().print(build_tree(inventory.decorator, title))

# 🧪⚙️
