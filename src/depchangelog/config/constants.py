"""Configuration constants.

Fixed formats that should NOT be user-configurable. For configurable values,
see models.py.
"""

# =============================================================================
# Changelog markup
# =============================================================================

LINE_BREAK = "\r\n"
"""Line break used by rendered changelogs and synthesized entry bodies."""

TITLE_PREFIX = "# "
"""Prefix of the document title heading."""

VERSION_PREFIX = "## "
"""Prefix of every version entry heading."""

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_PACKAGES_DIR = "packages"
DEFAULT_MANIFEST_NAME = "package.json"
DEFAULT_CHANGELOG_NAME = "CHANGELOG.md"
DEFAULT_BASELINE_PATH = ".depchangelog/baseline.json"

CONFIG_DIR_NAME = ".depchangelog"
"""Per-repo directory holding config.yaml (and the default baseline)."""
