"""
Centralized logging for the NEUROEVO system.

Console output is human readable; the optional rotating log file holds one
JSON object per record. Every record emitted while a decorated search run is
active carries the run's correlation ID, so the log of one evolutionary run
can be pulled out of a shared file.
"""

import functools
import json
import logging
import logging.handlers
import sys
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


DEFAULT_LOG_FILE = Path("logs") / "neuroevo.log"
CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# JSON key -> LogRecord attribute
_RECORD_FIELDS = (
    ("level", "levelname"),
    ("logger", "name"),
    ("module", "module"),
    ("function", "funcName"),
    ("line", "lineno"),
)


class CorrelationFilter(logging.Filter):
    """Stamps records with the correlation ID of the active run."""

    def __init__(self):
        super().__init__()
        self.correlation_id = None

    def filter(self, record):
        if self.correlation_id:
            record.correlation_id = self.correlation_id
        return True

    def set_correlation_id(self, correlation_id: Optional[str]):
        self.correlation_id = correlation_id


class StructuredFormatter(logging.Formatter):
    """Formats log records as single-line JSON."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "message": record.getMessage(),
        }
        for key, attribute in _RECORD_FIELDS:
            log_entry[key] = getattr(record, attribute)

        correlation_id = getattr(record, 'correlation_id', None)
        if correlation_id:
            log_entry["correlation_id"] = correlation_id

        log_entry.update(getattr(record, 'extra_fields', {}))

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # numpy scalars and paths are not JSON types
        return json.dumps(log_entry, default=str)


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(log_file: Path, max_file_size: int, backup_count: int) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=max_file_size,
        backupCount=backup_count
    )
    handler.setFormatter(StructuredFormatter())
    return handler


def _correlation_filter(root_logger: logging.Logger) -> Optional[CorrelationFilter]:
    for filter_obj in root_logger.filters:
        if isinstance(filter_obj, CorrelationFilter):
            return filter_obj
    return None


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    enable_console: bool = True,
    enable_file: bool = True,
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> logging.Logger:
    """
    Set up logging for the NEUROEVO system.

    Calling it again replaces the previous handlers and correlation filter.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: JSON log file path, defaults to logs/neuroevo.log
        enable_console: Whether to log to stdout
        enable_file: Whether to log to the rotating file
        max_file_size: Maximum size of log file before rotation
        backup_count: Number of rotated files to keep

    Returns:
        Configured root logger
    """
    log_file = Path(log_file) if log_file else DEFAULT_LOG_FILE

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    if enable_console:
        root_logger.addHandler(_console_handler())
    if enable_file:
        root_logger.addHandler(_file_handler(log_file, max_file_size, backup_count))

    existing = _correlation_filter(root_logger)
    if existing is not None:
        root_logger.removeFilter(existing)
    root_logger.addFilter(CorrelationFilter())

    get_logger(__name__).info("NEUROEVO logging system initialized", extra={
        "extra_fields": {
            "log_level": level,
            "log_file": str(log_file) if enable_file else None,
            "enable_console": enable_console,
            "enable_file": enable_file
        }
    })

    return root_logger


def configure_logging(logging_config, enable_console: bool = True) -> logging.Logger:
    """Set up logging from the ``logging`` section of a :class:`neuroevo.core.config.Config`."""
    return setup_logging(
        level=logging_config.level,
        log_file=Path(logging_config.log_file),
        enable_console=enable_console,
        enable_file=logging_config.enable_file,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_correlation_id(correlation_id: Optional[str]):
    """
    Set the correlation ID stamped on subsequent records.

    Has no effect until :func:`setup_logging` has installed the filter.
    """
    filter_obj = _correlation_filter(logging.getLogger())
    if filter_obj is not None:
        filter_obj.set_correlation_id(correlation_id)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


def log_with_correlation(func):
    """
    Run ``func`` under a fresh correlation ID and log how long it took.

    Start and completion are logged at DEBUG; a failure is logged at ERROR
    with its traceback and re-raised.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        correlation_id = generate_correlation_id()
        set_correlation_id(correlation_id)
        logger = get_logger(func.__module__)
        fields = {"correlation_id": correlation_id, "function": func.__name__}

        logger.debug(f"Starting {func.__name__}", extra={"extra_fields": fields})
        start_time = time.time()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            elapsed = time.time() - start_time
            logger.error(f"Error in {func.__name__} after {elapsed:.4f}s: {str(e)}", extra={
                "extra_fields": {**fields, "elapsed": elapsed, "error_type": type(e).__name__}
            }, exc_info=True)
            raise

        elapsed = time.time() - start_time
        logger.debug(f"Completed {func.__name__} in {elapsed:.4f}s", extra={
            "extra_fields": {**fields, "elapsed": elapsed, "result_type": type(result).__name__}
        })
        return result

    return wrapper
