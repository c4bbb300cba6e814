"""CLI utilities."""

from pathlib import Path

import click

from depchangelog.config.loader import load_config
from depchangelog.core.errors import ConfigError
from depchangelog.core.logging import configure_logging
from depchangelog.update.ops import UpdateOps


def find_repo_root(start_path: Path | None = None) -> Path:
    """Find the git repository root from the given path.

    Walks up the directory tree looking for a .git directory.
    If start_path is None, uses the current working directory.

    Raises:
        click.ClickException: If not inside a git repository
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent

    if (current / ".git").exists():
        return current

    raise click.ClickException(
        f"Not inside a git repository: {start_path}\n"
        "depchangelog must be run from within a git repository, or pass --root PATH."
    )


def build_ops(repo_root: Path, *, verbose: bool = False) -> UpdateOps:
    """Load config for ``repo_root``, configure logging, and build UpdateOps.

    Raises:
        click.ClickException: If the configuration is invalid
    """
    try:
        config = load_config(repo_root)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    logging_config = config.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(logging_config, verbose=verbose)

    return UpdateOps(repo_root, config)
