"""Config module exports."""

from depchangelog.config.loader import DepChangelogSettings, load_config
from depchangelog.config.models import (
    BaselineConfig,
    DepChangelogConfig,
    LoggingConfig,
    PackagesConfig,
)

__all__ = [
    "load_config",
    "DepChangelogConfig",
    "DepChangelogSettings",
    "BaselineConfig",
    "LoggingConfig",
    "PackagesConfig",
]
