"""Update operations module - before/after phases."""

from depchangelog.update.ops import (
    CaptureResult,
    ChangelogUpdate,
    UpdateOps,
    UpdateSummary,
)

__all__ = ["CaptureResult", "ChangelogUpdate", "UpdateOps", "UpdateSummary"]
