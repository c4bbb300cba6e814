"""Structured logging for the before/after phases.

Log events are diagnostics. They go to the configured outputs, but console
outputs stay silent unless verbose mode is on: user-facing lines are printed
through ``depchangelog.core.progress`` instead. Every event carries the run
id, so a before and an after run can be told apart in a shared log file.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from depchangelog.config.models import LoggingConfig, LogOutputConfig

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)

# Handlers owned by configure_logging, closed when it runs again
_installed: list[logging.Handler] = []


def set_run_id(run_id: str | None = None) -> str:
    """Set or generate the id stamped on every event of this run."""
    rid = run_id or uuid4().hex[:12]
    _run_id.set(rid)
    return rid


def _add_run_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := _run_id.get():
        event_dict["run_id"] = rid
    return event_dict


_SHARED: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    _add_run_id,  # type: ignore[list-item]
]


class ConsoleFilter(logging.Filter):
    """Gate for console handlers.

    Closed by default. When opened for verbose runs it still closes while a
    spinner owns the terminal.
    """

    def __init__(self, *, verbose: bool) -> None:
        super().__init__()
        self.verbose = verbose

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: ARG002
        # Import here to avoid circular dependency
        from depchangelog.core.progress import is_console_suppressed

        return self.verbose and not is_console_suppressed()


def _build_handler(output: LogOutputConfig, *, verbose: bool) -> logging.Handler:
    handler: logging.Handler
    is_console = output.destination in ("stderr", "stdout")
    if is_console:
        # Looked up per call: test runners swap the streams
        stream = getattr(sys, output.destination)
        handler = logging.StreamHandler(stream)
        handler.addFilter(ConsoleFilter(verbose=verbose))
    else:
        path = Path(output.destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a", encoding="utf-8")

    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=is_console and stream.isatty(),
            pad_event_to=0,
            pad_level=False,
        )
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=_SHARED)
    )
    return handler


def configure_logging(config: LoggingConfig, *, verbose: bool = False) -> None:
    """Route structlog through stdlib handlers built from ``config``.

    Args:
        config: Level and outputs to install. Replaces any earlier setup.
        verbose: Let events through to console outputs too.
    """
    level = logging.getLevelNamesMapping()[config.level]

    structlog.configure(
        processors=[*_SHARED, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Uncached so module-level loggers pick up reconfiguration
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    while _installed:
        _installed.pop().close()
    root_logger.setLevel(level)

    for output in config.outputs:
        handler = _build_handler(output, verbose=verbose)
        handler.setLevel(output.level or config.level)
        root_logger.addHandler(handler)
        _installed.append(handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Module logger. Safe to create at import time, before configuration."""
    return structlog.get_logger(logger=name)  # type: ignore[no-any-return]
