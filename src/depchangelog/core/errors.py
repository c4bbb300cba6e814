"""depchangelog error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Baseline
- 4xxx: Changelog
- 5xxx: Manifest
- 6xxx: Package join
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Baseline (3xxx)
    BASELINE_MISSING = 3001
    BASELINE_CORRUPT = 3002

    # Changelog (4xxx)
    CHANGELOG_PARSE_FAILED = 4001
    CHANGELOG_WRITE_FAILED = 4002

    # Manifest (5xxx)
    MANIFEST_READ_FAILED = 5001

    # Package join (6xxx)
    PACKAGE_UNMATCHED = 6001


@dataclass(frozen=True, slots=True)
class DepChangelogError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'BASELINE_MISSING')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(DepChangelogError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class MissingBaselineError(DepChangelogError):
    """The comparison phase ran without a usable baseline.

    Fatal for the whole run: nothing is written when this is raised.
    """

    @classmethod
    def missing(cls, path: str) -> "MissingBaselineError":
        return cls(
            code=ErrorCode.BASELINE_MISSING,
            message=f"No baseline found at {path}",
            details={"path": path},
        )

    @classmethod
    def corrupt(cls, path: str, reason: str) -> "MissingBaselineError":
        return cls(
            code=ErrorCode.BASELINE_CORRUPT,
            message=f"Baseline at {path} is not readable: {reason}",
            details={"path": path, "reason": reason},
        )


class ChangelogParseError(DepChangelogError):
    """A changelog file could not be read into a document."""

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "ChangelogParseError":
        return cls(
            code=ErrorCode.CHANGELOG_PARSE_FAILED,
            message=f"Failed to parse changelog {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class ChangelogWriteError(DepChangelogError):
    """Writing one package's changelog failed."""

    @classmethod
    def failed(cls, path: str, reason: str) -> "ChangelogWriteError":
        return cls(
            code=ErrorCode.CHANGELOG_WRITE_FAILED,
            message=f"Failed to write changelog {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class ManifestReadError(DepChangelogError):
    """A manifest could not be read or decoded."""

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "ManifestReadError":
        return cls(
            code=ErrorCode.MANIFEST_READ_FAILED,
            message=f"Failed to read manifest {path}: {reason}",
            details={"path": path, "reason": reason},
        )
