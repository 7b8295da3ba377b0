"""Logging helpers for spacetime-token.

Diagnostics go to stderr (and optionally a rotating log file) so that
stdout stays reserved for command output. Every handler carries a
``SensitiveDataFilter`` because this tool handles bearer tokens.
"""

import json
import logging
import re
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

from spacetime_token.core.config import LogConfig
from spacetime_token.core.constants import DEFAULT_LOG_LEVEL, VALID_LOG_LEVELS

_REDACTED_VALUE = "[REDACTED]"
_SENSITIVE_KEY_REGEX = r"[A-Za-z0-9_-]*?(?:token|secret|password|passwd|api[_-]?key|authorization)"
_MESSAGE_VALUE_REGEX = r"""(?:"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*'|[^,\s;}\]]+)"""
_KEY_VALUE_PATTERN = re.compile(
    rf"""(?ix)
    (?P<key>["']?(?<![A-Za-z0-9_]){_SENSITIVE_KEY_REGEX}["']?)
    (?P<separator>\s*[:=]\s*)
    (?!Bearer\s)
    (?P<value>{_MESSAGE_VALUE_REGEX})
    """
)
_BEARER_PATTERN = re.compile(r"(?i)\b(bearer)\s+([A-Za-z0-9._~+/=-]+)")


def _redact_captured_value(value: str) -> str:
    if len(value) >= 2 and value[0] in {"'", '"'} and value[-1] == value[0]:
        return f"{value[0]}{_REDACTED_VALUE}{value[0]}"
    return _REDACTED_VALUE


def _redact_message(message: str) -> str:
    redacted = _KEY_VALUE_PATTERN.sub(
        lambda m: f"{m.group('key')}{m.group('separator')}{_redact_captured_value(m.group('value'))}",
        message,
    )
    return _BEARER_PATTERN.sub(lambda m: f"{m.group(1)} {_REDACTED_VALUE}", redacted)


def _safe_record_message(record: logging.LogRecord) -> str:
    try:
        return record.getMessage()
    except Exception:
        # Bad placeholders or a broken __str__ in the arguments
        return f"{getattr(record, 'msg', '')!s} [log-message-format-error]"


class SensitiveDataFilter(logging.Filter):
    """Best-effort redaction of tokens and secrets in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = _redact_message(_safe_record_message(record))
        record.args = ()
        return True


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging output.

    Each log record is a single JSON object on one line.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": _redact_message(_safe_record_message(record)),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(config: LogConfig | None = None) -> logging.Logger:
    """Configure the root logger for a single CLI invocation.

    Args:
        config: Logging configuration; defaults to ``LogConfig()``

    Returns:
        The package logger
    """
    if config is None:
        config = LogConfig()

    log_level = config.level.upper()
    if log_level not in VALID_LOG_LEVELS:
        print(f"Warning: Invalid log level '{config.level}', using {DEFAULT_LOG_LEVEL}", file=sys.stderr)
        log_level = DEFAULT_LOG_LEVEL
    numeric_level = getattr(logging, log_level)

    # Clear any existing handlers from root logger
    for handler in logging.root.handlers[:]:
        handler.close()
        logging.root.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        log_file = Path(config.file).expanduser()
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                RotatingFileHandler(log_file, maxBytes=config.file_max_bytes, backupCount=config.file_backup_count)
            )
        except OSError as e:
            print(f"Warning: Cannot open log file {log_file}: {e}. Logging to console only.", file=sys.stderr)

    if config.format.lower() == "json":
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(numeric_level)
        handler.addFilter(SensitiveDataFilter())
        logging.root.addHandler(handler)

    logging.root.setLevel(numeric_level)

    logger = logging.getLogger("spacetime_token")
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logger.debug(f"Logging initialized at {log_level}")
    return logger
