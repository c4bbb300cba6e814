"""depchangelog before command - capture the dependency baseline."""

from pathlib import Path

import click
from rich.markup import escape

from depchangelog.cli.utils import build_ops, find_repo_root
from depchangelog.core.progress import pluralize, spinner, status


@click.command()
@click.option(
    "--root",
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Repository root (default: git root above the current directory)",
)
@click.pass_context
def before_command(ctx: click.Context, root: Path | None) -> None:
    """Snapshot every package's dependencies and changelog.

    Run before bumping versions (npm "preversion"). The snapshot is kept
    until 'depchangelog after' consumes it.
    """
    repo_root = find_repo_root(root)
    ops = build_ops(repo_root, verbose=ctx.obj.get("verbose", False))

    with spinner("Capturing baseline"):
        result = ops.capture_baseline()

    for failure in result.parse_failures:
        status(escape(failure.message), style="warning")

    click.echo(f"Captured {pluralize(result.packages, 'package')} to {result.baseline_path}")
