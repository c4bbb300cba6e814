"""depchangelog after command - write changelog entries for dependency changes."""

from pathlib import Path

import click
from rich.markup import escape

from depchangelog.cli.utils import build_ops, find_repo_root
from depchangelog.core.errors import MissingBaselineError
from depchangelog.core.logging import get_logger
from depchangelog.core.progress import spinner, status

log = get_logger("cli.after")


@click.command()
@click.option(
    "--root",
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Repository root (default: git root above the current directory)",
)
@click.pass_context
def after_command(ctx: click.Context, root: Path | None) -> None:
    """Compare against the baseline and update changelogs.

    Run after bumping versions (npm "version"). Every package whose
    dependencies changed gets a new entry titled with its new version and
    today's date. The baseline is deleted afterwards.
    """
    repo_root = find_repo_root(root)
    ops = build_ops(repo_root, verbose=ctx.obj.get("verbose", False))

    try:
        with spinner("Updating changelogs"):
            summary = ops.apply_updates()
    except MissingBaselineError as e:
        log.error("baseline_missing", **e.to_dict())
        raise click.ClickException(
            "Please run 'depchangelog before' before running 'depchangelog after'"
        ) from e

    for parse_failure in summary.parse_failures:
        status(escape(parse_failure.message), style="warning")
    for unmatched in summary.unmatched:
        status(escape(f"Skipped {unmatched.message}"), style="warning")
    for update in summary.updates:
        status(escape(f"{update.path}: {update.title}"), style="success")
    for failure in summary.failures:
        status(escape(failure.message), style="error")

    click.echo(summary.message)

    if summary.failures:
        ctx.exit(1)
