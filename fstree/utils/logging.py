"""Minimal logging utilities for fstree.

This module keeps a tiny abstraction layer around the standard :mod:`logging`
package.  It offers a small formatter that can display the walk root stored in
a ``ContextVar``, a lightweight wrapper class that accepts keyword arguments as
contextual data, and a couple of helpers the walker and the CLI rely on.

Diagnostics always go to ``stderr``: ``stdout`` carries the rendered tree.

Usage
-----
Create module-level loggers by importing :func:`get_logger` and calling it
with the module's ``__name__``::

    from fstree.utils.logging import get_logger

    logger = get_logger(__name__)

    def visit(path: str) -> None:
        logger.debug("Listing directory", path=path)

"""

from __future__ import annotations

import json
import logging
import sys
import time
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional, Union

walk_root_context: ContextVar[Optional[str]] = ContextVar("walk_root", default=None)


# ---------------------------------------------------------------------------
# Formatting and logger wrapper
# ---------------------------------------------------------------------------

class FstreeFormatter(logging.Formatter):
    """Very small formatter that optionally appends the active walk root."""

    def __init__(self, *, show_context: bool = True) -> None:
        super().__init__(fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
        self.show_context = show_context

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        """Format the record and append context stored in :mod:`contextvars`."""

        message = super().format(record)
        if not self.show_context:
            return message

        root = walk_root_context.get()
        if root:
            return f"{message} (root={root})"
        return message


def _encode_context(data: Dict[str, Any]) -> str:
    """Serialize contextual data in a predictable manner."""

    if not data:
        return ""

    try:
        return json.dumps(data, separators=(",", ":"), sort_keys=True, default=str)
    except TypeError:
        # Mixed key types cannot be sorted; every value becomes a string.
        safe_data = {str(key): str(value) for key, value in data.items()}
        return json.dumps(safe_data, separators=(",", ":"), sort_keys=True)


class FstreeLogger:
    """Thin wrapper around :class:`logging.Logger` accepting context kwargs."""

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    def setLevel(self, level: Union[int, str]) -> None:
        """Proxy ``setLevel`` to the wrapped :class:`logging.Logger`."""

        self._logger.setLevel(level)

    def _log(
        self,
        level: int,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        exc_info: Optional[bool] = None,
        **kwargs: Any,
    ) -> None:
        payload: Dict[str, Any] = {}
        if context:
            payload.update(context)
        if kwargs:
            payload.update(kwargs)

        if payload:
            message = f"{message} | {_encode_context(payload)}"

        self._logger.log(level, message, exc_info=exc_info)

    def debug(self, message: str, context: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, context, **kwargs)

    def info(self, message: str, context: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
        self._log(logging.INFO, message, context, **kwargs)

    def warning(self, message: str, context: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, context, **kwargs)

    def error(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        *,
        exc_info: bool = False,
        **kwargs: Any,
    ) -> None:
        self._log(logging.ERROR, message, context, exc_info=exc_info, **kwargs)

    def exception(self, message: str, context: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, context, exc_info=True, **kwargs)


def get_logger(name: str) -> FstreeLogger:
    """Return an :class:`FstreeLogger` for ``name``."""

    return FstreeLogger(name)


# ---------------------------------------------------------------------------
# Context managers
# ---------------------------------------------------------------------------


class WalkContext:
    """Track one traversal for the duration of a ``with`` block.

    Examples
    --------
    >>> from fstree.utils.logging import WalkContext
    >>> with WalkContext("./src"):
    ...     ...  # walk the tree
    """

    def __init__(self, root: str) -> None:
        self.root = root
        self._start = 0.0
        self._token = None

    def __enter__(self) -> "WalkContext":
        self._start = time.time()
        self._token = walk_root_context.set(self.root)
        get_logger("fstree.walk").debug("Walk started")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: D401
        duration_ms = round((time.time() - self._start) * 1000, 2)
        logger = get_logger("fstree.walk")

        if exc_type is None:
            logger.debug("Walk completed", duration_ms=duration_ms, success=True)
        else:
            logger.debug(
                "Walk failed",
                duration_ms=duration_ms,
                success=False,
                error_type=exc_type.__name__,
                error_message=str(exc) if exc else None,
            )

        walk_root_context.reset(self._token)
        self._token = None


def debug_timing(operation: str):
    """Context manager recording the duration of ``operation``.

    Examples
    --------
    >>> from fstree.utils.logging import debug_timing
    >>> with debug_timing("render"):
    ...     ...  # code being timed
    """

    class TimingContext:
        def __init__(self, operation_name: str) -> None:
            self.operation = operation_name
            self.start = 0.0
            self.logger = get_logger("fstree.timing")

        def __enter__(self) -> "TimingContext":
            self.start = time.time()
            self.logger.debug(f"Started: {self.operation}")
            return self

        def __exit__(self, exc_type, exc, tb) -> None:
            duration_ms = round((time.time() - self.start) * 1000, 2)
            if exc_type is None:
                self.logger.debug("Completed operation", operation=self.operation, duration_ms=duration_ms, success=True)
            else:
                self.logger.error(
                    "Failed operation",
                    operation=self.operation,
                    duration_ms=duration_ms,
                    success=False,
                    error_type=exc_type.__name__,
                )

    return TimingContext(operation)


# ---------------------------------------------------------------------------
# Setup helpers
# ---------------------------------------------------------------------------


def setup_logging(
    log_level: str = "WARNING",
    log_file: Optional[Path] = None,
    *,
    show_context: bool = True,
    debug_mode: bool = False,
) -> Dict[str, Any]:
    """Configure the root logger with a tiny amount of ceremony.

    Examples
    --------
    >>> from fstree.utils.logging import setup_logging, get_logger
    >>> setup_logging(log_level="DEBUG")
    {'level': 'DEBUG', 'handlers': ['console'], ...}
    >>> get_logger("example").info("Ready")
    """

    if debug_mode:
        log_level = "DEBUG"

    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = FstreeFormatter(show_context=show_context)
    handlers: list[str] = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)
    handlers.append("console")

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path)
        file_handler.setLevel(logging.DEBUG if debug_mode else numeric_level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        handlers.append("file")

    return {
        "level": log_level.upper(),
        "handlers": handlers,
        "log_file": str(log_file) if log_file else None,
        "debug_mode": debug_mode,
        "show_context": show_context,
    }


def log_configuration(config: Dict[str, Any]) -> None:
    """Log the effective configuration mapping at debug level."""

    logger = get_logger("fstree.config")
    logger.debug("Configuration loaded", config=config)
