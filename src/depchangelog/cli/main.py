"""depchangelog CLI - depchangelog command."""

import click

from depchangelog import __version__
from depchangelog.cli.after import after_command
from depchangelog.cli.before import before_command
from depchangelog.core.logging import set_run_id


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="depchangelog")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """depchangelog - changelog entries for dependency bumps across packages.

    Run 'before' ahead of a version bump and 'after' once it is done.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    set_run_id()
    if ctx.invoked_subcommand is None:
        raise click.UsageError("1 command expected (before or after)", ctx=ctx)


cli.add_command(before_command, name="before")
cli.add_command(after_command, name="after")
# npm lifecycle hook names
cli.add_command(before_command, name="preversion")
cli.add_command(after_command, name="version")


if __name__ == "__main__":
    cli()
