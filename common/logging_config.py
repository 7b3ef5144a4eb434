import logging
import os
import re
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

REDACT_ENV_VAR = 'FILE_REGISTRY_REDACT_IDENTITIES'


class IdentityRedactionFilter(logging.Filter):
    """Filter to mask caller and owner identities in log records."""

    PATTERNS = [
        (re.compile(r'(caller["\']?\s*[:=]\s*["\']?)([^"\'}\]\s,]+)', re.IGNORECASE), r'\1***MASKED***'),
        (re.compile(r'(owner["\']?\s*[:=]\s*["\']?)([^"\'}\]\s,]+)', re.IGNORECASE), r'\1***MASKED***'),
        (re.compile(r'(identity["\']?\s*[:=]\s*["\']?)([^"\'}\]\s,]+)', re.IGNORECASE), r'\1***MASKED***'),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Mask identities in the log message."""
        if isinstance(record.msg, str):
            record.msg = self._mask_value(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._mask_value(v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._mask_value(arg) for arg in record.args)

        return True

    def _mask_value(self, value):
        if isinstance(value, str):
            for pattern, replacement in self.PATTERNS:
                value = pattern.sub(replacement, value)
        return value


def redaction_enabled() -> bool:
    return os.getenv(REDACT_ENV_VAR, '').strip().lower() in ('1', 'true', 'yes', 'on')


def setup_logging(component_name: str, log_level: Optional[str] = None) -> logging.Logger:
    """
    Set up logging configuration for a component.

    Args:
        component_name: Name of the component (e.g., 'registry', 'cli')
        log_level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL env var or INFO

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = os.getenv('LOG_LEVEL', 'INFO')

    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(component_name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    if redaction_enabled():
        handler.addFilter(IdentityRedactionFilter())

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
