import json
import logging
import logging.config
import os
from typing import Optional

from lpfg.core.config import LoggingConfig

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with consistent naming convention.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        Logger instance.
    """
    if name is None:
        import inspect
        frame = inspect.currentframe().f_back
        name = frame.f_globals.get('__name__', 'lpfg')

    return logging.getLogger(name)


def init_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Initialize logging configuration for command-line use.

    Args:
        config: Logging configuration. If None, uses defaults (console only).

    Raises:
        ConfigurationError: If the configuration is invalid.
        OSError: If the log directory cannot be created or is not writable.
    """
    config = config or LoggingConfig()
    config.validate()
    level = str(config.level).upper()

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": level,
        },
    }

    if config.log_file:
        log_dir = os.path.dirname(os.path.abspath(config.log_file))
        os.makedirs(log_dir, exist_ok=True)
        if not os.access(log_dir, os.W_OK):
            raise OSError(f"Log directory {log_dir} is not writable")

        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "json",
            "filename": config.log_file,
            "maxBytes": config.max_bytes,
            "backupCount": config.backup_count,
            "encoding": "utf-8",
            "level": level,
        }

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": DEFAULT_FORMAT,
                "datefmt": DEFAULT_DATEFMT,
            },
            "json": {
                "()": "lpfg.utils.logging.JsonFormatter",
            },
        },
        "handlers": handlers,
        "loggers": {
            "lpfg": {
                "handlers": list(handlers),
                "level": level,
                "propagate": False,
            },
        },
    })

    get_logger(__name__).debug(
        "Logging initialized. Log level: %s, log file: %s", level, config.log_file
    )


class JsonFormatter(logging.Formatter):
    """
    JSON formatter for structured log files.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if hasattr(record, 'extra_fields'):
            log_entry.update(record.extra_fields)

        return json.dumps(log_entry, ensure_ascii=False)
