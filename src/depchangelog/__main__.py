"""Entry point for ``python -m depchangelog``."""

from depchangelog.cli.main import cli

if __name__ == "__main__":
    cli()
