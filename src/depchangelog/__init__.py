"""depchangelog - dependency changelog entries for multi-package repositories."""

__version__ = "0.1.0"
