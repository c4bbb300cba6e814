"""Core module exports."""

from depchangelog.core.errors import (
    ChangelogParseError,
    ChangelogWriteError,
    ConfigError,
    DepChangelogError,
    ErrorCode,
    ManifestReadError,
    MissingBaselineError,
)
from depchangelog.core.logging import configure_logging, get_logger, set_run_id
from depchangelog.core.progress import pluralize, spinner, status

__all__ = [
    # Errors
    "ChangelogParseError",
    "ChangelogWriteError",
    "ConfigError",
    "DepChangelogError",
    "ErrorCode",
    "ManifestReadError",
    "MissingBaselineError",
    # Logging
    "configure_logging",
    "get_logger",
    "set_run_id",
    # Progress
    "pluralize",
    "spinner",
    "status",
]
