# -*- coding: utf-8 -*-
"""
Logging for the MCDM engine.

All engine modules log through children of the ``mcdm_engine`` logger,
obtained with ``get_module_logger('mcdm.topsis')`` and similar. The package
installs only a ``NullHandler``, so importing the engine prints nothing.
Applications that want output call ``setup_logger`` once, choosing any of:

- a console stream (plain text, ``level`` and above)
- a rotating text file (always DEBUG, with logger name and line number)
- a rotating JSON-lines file (one object per record, for log shippers)

Records emitted inside ``log_context(method=..., scenario=...)`` carry those
labels, both as a ``[method=... scenario=...]`` prefix in text output and as
top-level keys in JSON output. ``log_execution`` and ``timed_operation``
report call durations at DEBUG.
"""

import logging
import logging.handlers
import json
import sys
import time
import threading
from pathlib import Path
from datetime import datetime
from typing import Optional, Dict, Any, Iterator, Tuple, Union, Callable
from contextlib import contextmanager
from functools import wraps


# =============================================================================
# Constants
# =============================================================================

LOG_NAME = "mcdm_engine"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_DATE_FORMAT = "%H:%M:%S"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5

logging.getLogger(LOG_NAME).addHandler(logging.NullHandler())


# =============================================================================
# Context
# =============================================================================

class LogContext:
    """Per-thread labels (method, scenario, ...) attached to engine records."""
    _local = threading.local()

    @classmethod
    def get(cls) -> Dict[str, Any]:
        context = getattr(cls._local, 'context', None)
        if context is None:
            context = cls._local.context = {}
        return context

    @classmethod
    def set(cls, key: str, value: Any) -> None:
        cls.get()[key] = value

    @classmethod
    def remove(cls, key: str) -> None:
        cls.get().pop(key, None)

    @classmethod
    def clear(cls) -> None:
        cls._local.context = {}


class ContextFilter(logging.Filter):
    """Copy the active labels onto each record as attributes."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.__dict__.update(LogContext.get())
        return True


# =============================================================================
# Formatters
# =============================================================================

class CleanFormatter(logging.Formatter):
    """Text formatter that prefixes the message with the active labels."""

    @staticmethod
    def _prefix() -> str:
        labels = " ".join(f"{key}={value}" for key, value in LogContext.get().items())
        return f"[{labels}] " if labels else ""

    def format(self, record: logging.LogRecord) -> str:
        prefix = self._prefix()
        if not prefix:
            return super().format(record)
        # copy so other handlers see the unprefixed message
        labelled = logging.makeLogRecord(record.__dict__)
        labelled.msg = prefix + str(record.msg)
        return super().format(labelled)


# attributes every LogRecord has; anything else came from ``extra`` or a filter
_RECORD_FIELDS = frozenset(logging.makeLogRecord({}).__dict__) | {'message', 'asctime'}


class JSONFormatter(logging.Formatter):
    """One JSON object per record: level, logger, message, location and labels."""

    def __init__(self, include_extra: bool = True):
        super().__init__()
        self.include_extra = include_extra

    @staticmethod
    def _jsonable(value: Any) -> Any:
        try:
            json.dumps(value)
        except (TypeError, ValueError):
            return str(value)
        return value

    def _exception(self, record: logging.LogRecord) -> Dict[str, Any]:
        exc_type, exc_value, _ = record.exc_info
        return {
            "type": getattr(exc_type, '__name__', None),
            "message": None if exc_value is None else str(exc_value),
            "traceback": self.formatException(record.exc_info),
        }

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            entry["exception"] = self._exception(record)
        if self.include_extra:
            entry.update((key, self._jsonable(value))
                         for key, value in record.__dict__.items()
                         if key not in _RECORD_FIELDS)
        return json.dumps(entry, ensure_ascii=False, default=str)


# =============================================================================
# Handlers
# =============================================================================

class SafeRotatingFileHandler(logging.handlers.RotatingFileHandler):
    """
    Rotating file handler for engine log files.

    Creates the parent directory on construction and serialises ``emit``
    across threads; write failures go to ``handleError`` instead of the caller.
    """

    def __init__(self, filename, *args, **kwargs):
        Path(filename).parent.mkdir(parents=True, exist_ok=True)
        super().__init__(filename, *args, **kwargs)
        self._emit_lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        with self._emit_lock:
            try:
                super().emit(record)
            except Exception:
                self.handleError(record)


# =============================================================================
# Logger factory
# =============================================================================

def _qualify(name: str) -> str:
    """Nest ``name`` under the engine root unless it already is."""
    if name == LOG_NAME or name.startswith(LOG_NAME + "."):
        return name
    return f"{LOG_NAME}.{name}"


def _detach_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()


class LoggerFactory:
    """Configures engine loggers and caches them by name."""

    _loggers: Dict[str, logging.Logger] = {}

    @staticmethod
    def _handler_specs(level: int, log_file, json_file, console: bool, stream,
                       max_bytes: int, backup_count: int
                       ) -> Iterator[Tuple[logging.Handler, int, logging.Formatter]]:
        """Yield ``(handler, level, formatter)`` for each requested output."""
        if console:
            yield (logging.StreamHandler(stream or sys.stdout), level,
                   CleanFormatter(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT))
        rotation = dict(maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8')
        if log_file:
            yield (SafeRotatingFileHandler(Path(log_file), **rotation), logging.DEBUG,
                   CleanFormatter(fmt=FILE_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        if json_file:
            yield SafeRotatingFileHandler(Path(json_file), **rotation), level, JSONFormatter()

    @classmethod
    def setup(
        cls,
        name: str = LOG_NAME,
        level: Union[int, str] = logging.INFO,
        log_file: Optional[Path] = None,
        json_file: Optional[Path] = None,
        console: bool = True,
        max_bytes: int = MAX_LOG_SIZE,
        backup_count: int = BACKUP_COUNT,
        stream=None,
    ) -> logging.Logger:
        """
        (Re)configure the outputs of an engine logger.

        Existing handlers on ``name`` are closed and replaced, and the logger
        stops propagating so records are not written twice. With no output
        requested a ``NullHandler`` keeps it silent.

        Parameters
        ----------
        name : str
            Logger to configure, normally the engine root.
        level : int or str
            Threshold for console and JSON output (``'DEBUG'`` etc. accepted).
        log_file, json_file : Path, optional
            Text (always DEBUG) and JSON-lines files, rotated at ``max_bytes``
            with ``backup_count`` backups.
        console : bool
            Write to ``stream`` (``sys.stdout`` when not given).
        """
        if isinstance(level, str):
            level = getattr(logging, level.upper(), logging.INFO)

        logger = logging.getLogger(name)
        _detach_handlers(logger)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        for handler, handler_level, formatter in cls._handler_specs(
                level, log_file, json_file, console, stream, max_bytes, backup_count):
            handler.setLevel(handler_level)
            handler.setFormatter(formatter)
            handler.addFilter(ContextFilter())
            logger.addHandler(handler)

        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

        cls._loggers[name] = logger
        return logger

    @classmethod
    def get_logger(cls, name: str = LOG_NAME) -> logging.Logger:
        """Return the cached logger for ``name``, nested under ``mcdm_engine``."""
        if name not in cls._loggers:
            cls._loggers[name] = logging.getLogger(_qualify(name))
        return cls._loggers[name]

    @classmethod
    def get_module_logger(cls, module_name: str) -> logging.Logger:
        return cls.get_logger(_qualify(module_name))


# =============================================================================
# Convenience functions
# =============================================================================

def setup_logger(
    name: str = LOG_NAME,
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = True,
    json_file: Optional[Path] = None,
) -> logging.Logger:
    """Enable engine log output; see ``LoggerFactory.setup``."""
    return LoggerFactory.setup(name=name, level=level, log_file=log_file,
                               json_file=json_file, console=console)


def get_logger(name: str = LOG_NAME) -> logging.Logger:
    return LoggerFactory.get_logger(name)


def get_module_logger(module_name: str) -> logging.Logger:
    """Logger for an engine module, e.g. ``get_module_logger('analysis.sensitivity')``."""
    return LoggerFactory.get_module_logger(module_name)


# =============================================================================
# Timing helpers
# =============================================================================

def _short_repr(value: Any, limit: int) -> str:
    return repr(value)[:limit]


def log_execution(
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
    show_args: bool = False,
    show_result: bool = False
) -> Callable:
    """
    Decorator reporting each call of the wrapped function and its duration.

    Failures are logged at ERROR with the elapsed time and re-raised.
    ``show_args`` and ``show_result`` add truncated reprs to the messages.
    """
    def decorator(func: Callable) -> Callable:
        label = func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or get_logger()
            call = label
            if show_args:
                parts = [_short_repr(a, 50) for a in args]
                parts += [f"{k}={_short_repr(v, 50)}" for k, v in kwargs.items()]
                call = f"{label}({', '.join(parts)})"
            log.log(level, f"Calling {call}")

            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                log.error(f"{label} failed after {time.perf_counter() - start:.3f}s: {e}")
                raise
            elapsed = time.perf_counter() - start

            outcome = f"returned {_short_repr(result, 100)}" if show_result else "completed"
            log.log(level, f"{label} {outcome} ({elapsed:.3f}s)")
            return result

        return wrapper
    return decorator


@contextmanager
def log_context(**labels):
    """
    Attach labels to every record logged inside the block.

    Example:
        with log_context(method="VIKOR", scenario="oat:Price+10%"):
            logger.info("scoring")  # "[method=VIKOR scenario=oat:Price+10%] scoring"
    """
    for key, value in labels.items():
        LogContext.set(key, value)
    try:
        yield
    finally:
        for key in labels:
            LogContext.remove(key)


@contextmanager
def timed_operation(logger: logging.Logger, operation: str, level: int = logging.DEBUG):
    """Log ``Starting:``/``Finished:`` lines around a block, with its duration."""
    start = time.perf_counter()
    logger.log(level, f"Starting: {operation}")
    try:
        yield
    finally:
        logger.log(level, f"Finished: {operation} ({time.perf_counter() - start:.3f}s)")


__all__ = [
    'setup_logger',
    'get_logger',
    'get_module_logger',
    'LoggerFactory',
    'LogContext',
    'ContextFilter',
    'CleanFormatter',
    'JSONFormatter',
    'SafeRotatingFileHandler',
    'log_execution',
    'log_context',
    'timed_operation',
    'LOG_NAME',
]
