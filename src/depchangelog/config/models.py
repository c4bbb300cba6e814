"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (DEPCHANGELOG__SECTION__KEY)
3. Repo YAML (.depchangelog/config.yaml)
4. Global YAML (~/.config/depchangelog/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    DEPCHANGELOG__<SECTION>__<KEY>=<VALUE>

Examples:
    DEPCHANGELOG__LOGGING__LEVEL=DEBUG
    DEPCHANGELOG__PACKAGES__PACKAGES_DIR=libs
    DEPCHANGELOG__BASELINE__PATH=scripts/tmp-comparison.json
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from depchangelog.config.constants import (
    DEFAULT_BASELINE_PATH,
    DEFAULT_CHANGELOG_NAME,
    DEFAULT_MANIFEST_NAME,
    DEFAULT_PACKAGES_DIR,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        DEPCHANGELOG__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Console outputs only show events with --verbose.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class PackagesConfig(BaseModel):
    """Where packages live and what files describe them.

    Env vars:
        DEPCHANGELOG__PACKAGES__PACKAGES_DIR: Directory holding one folder per package
        DEPCHANGELOG__PACKAGES__MANIFEST_NAME: Manifest file name inside a package
        DEPCHANGELOG__PACKAGES__CHANGELOG_NAME: Changelog file name inside a package
    """

    packages_dir: str = Field(
        default=DEFAULT_PACKAGES_DIR,
        description="Directory (relative to the repo root) holding one folder per package.",
    )
    manifest_name: str = Field(
        default=DEFAULT_MANIFEST_NAME,
        description="Manifest file. Folders without a non-empty manifest are skipped.",
    )
    changelog_name: str = Field(
        default=DEFAULT_CHANGELOG_NAME,
        description="Changelog file rewritten in place by the after phase.",
    )

    @field_validator("manifest_name", "changelog_name")
    @classmethod
    def validate_file_name(cls, v: str) -> str:
        if not v or Path(v).name != v:
            raise ValueError(f"Must be a bare file name, got {v!r}")
        return v


class BaselineConfig(BaseModel):
    """Baseline side-channel configuration.

    Env vars:
        DEPCHANGELOG__BASELINE__PATH: Baseline file, relative to the repo root or absolute
    """

    path: str = Field(
        default=DEFAULT_BASELINE_PATH,
        description="Where the before phase stores its snapshot. "
        "Deleted once the after phase completes.",
    )


class DepChangelogConfig(BaseModel):
    """Root configuration for depchangelog.

    All settings can be configured via:
    1. Environment variables: DEPCHANGELOG__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    packages: PackagesConfig = Field(default_factory=PackagesConfig)
    baseline: BaselineConfig = Field(default_factory=BaselineConfig)
