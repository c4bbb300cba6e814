"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of depchangelog modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("depchangelog"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo logging configuration made by a test."""
    root_logger = logging.getLogger()
    kept = list(root_logger.handlers)
    yield
    structlog.reset_defaults()
    for handler in root_logger.handlers[:]:
        if handler not in kept:
            root_logger.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path_factory: pytest.TempPathFactory) -> Iterator[Path]:
    """Point the global config at a file that does not exist."""
    missing = tmp_path_factory.mktemp("global-config") / "config.yaml"
    with patch("depchangelog.config.loader.GLOBAL_CONFIG_PATH", missing):
        yield missing


def write_package(
    repo_root: Path,
    name: str,
    *,
    dependencies: dict[str, str] | None = None,
    version: str = "1.0.0",
    changelog: str | None = "# Changelog\r\n\r\nAll notable changes.",
) -> Path:
    """Create ``packages/<name>`` with a package.json and optional CHANGELOG.md."""
    import json

    package_dir = repo_root / "packages" / name
    package_dir.mkdir(parents=True, exist_ok=True)
    manifest = {"name": name, "version": version, "dependencies": dependencies or {}}
    (package_dir / "package.json").write_text(json.dumps(manifest, indent=2))
    if changelog is not None:
        (package_dir / "CHANGELOG.md").write_bytes(changelog.encode("utf-8"))
    return package_dir


@pytest.fixture
def monorepo(tmp_path: Path) -> Path:
    """Empty git-style repository root with a packages/ directory."""
    repo_root = tmp_path / "repo"
    (repo_root / ".git").mkdir(parents=True)
    (repo_root / "packages").mkdir()
    return repo_root
