import logging
import json
import sys
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, TextIO, Union


ROOT_LOGGER_NAME = "wls_exporter"


class LogFormat(Enum):
    PRETTY = "pretty"
    JSON = "json"


# ANSI color codes
RESET = "\033[0m"
COLORS = {
    "DEBUG": "\033[37m",   # White
    "INFO": "\033[36m",    # Cyan
    "WARNING": "\033[33m", # Yellow
    "ERROR": "\033[31m",   # Red
    "CRITICAL": "\033[41m\033[97m",  # White on Red background
    "TIME": "\033[90m",    # Gray for timestamps
    "MODULE": "\033[35m",  # Magenta
    "MESSAGE": "\033[0m",  # Default
}


class PrettyColoredFormatter(logging.Formatter):
    """
    Pretty, human-readable, colored log formatter.
    Format:
    2025-08-13 14:35:12.345 UTC | INFO     | core:123 | Loaded configuration
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        timestamp_colored = f"{COLORS['TIME']}{timestamp} UTC{RESET}"

        level_color = COLORS.get(record.levelname, "")
        level_name_colored = f"{level_color}{record.levelname:<8}{RESET}"

        location_colored = f"{COLORS['MODULE']}{record.module}:{record.lineno}{RESET}"

        message_colored = f"{COLORS['MESSAGE']}{record.getMessage()}{RESET}"

        if record.exc_info:
            message_colored += "\n" + self.formatException(record.exc_info)

        return f"{timestamp_colored} | {level_name_colored} | {location_colored} | {message_colored}"


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False)


def setup_logging(
    level: Union[str, int] = "INFO",
    log_format: Union[str, LogFormat] = LogFormat.PRETTY,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the package logger with a single stream handler.

    Calling this again replaces the previously installed handler, so the
    CLI can reconfigure logging without duplicating output.
    """
    fmt = LogFormat(log_format) if not isinstance(log_format, LogFormat) else log_format
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONFormatter() if fmt == LogFormat.JSON else PrettyColoredFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger
