"""Logging setup for the provider process.

The plugin host captures the provider's stderr, so console output goes there
rather than to stdout.
"""

import logging
import sys
import threading
from typing import Optional

from coderforge.config.schemas.logging_schema import LoggingConfig

ROOT_LOGGER_NAME = "coderforge"
MASK = "***"


class SensitiveDataFilter(logging.Filter):
    """Replaces registered secret values in log records with a mask."""

    def __init__(self) -> None:
        super().__init__()
        self._secrets: set[str] = set()
        self._lock = threading.Lock()

    def register(self, secret: Optional[str]) -> None:
        if secret:
            with self._lock:
                self._secrets.add(secret)

    def filter(self, record: logging.LogRecord) -> bool:
        with self._lock:
            secrets = tuple(self._secrets)
        if not secrets:
            return True
        message = record.getMessage()
        masked = message
        for secret in secrets:
            masked = masked.replace(secret, MASK)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


_sensitive_filter = SensitiveDataFilter()


def register_secret(secret: Optional[str]) -> None:
    """Mask ``secret`` in every record emitted by provider loggers."""
    _sensitive_filter.register(secret)


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the provider's root logger.

    Args:
        config: Logging configuration, defaults used when omitted

    Returns:
        The configured root logger
    """
    config = config or LoggingConfig()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, config.level, logging.INFO))
    root.propagate = False

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)
    handlers: list[logging.Handler] = []
    if config.console_enabled:
        handlers.append(logging.StreamHandler(sys.stderr))
    if config.file_path:
        handlers.append(logging.FileHandler(config.file_path))

    for handler in handlers:
        handler.setFormatter(formatter)
        if config.mask_sensitive:
            handler.addFilter(_sensitive_filter)
        root.addHandler(handler)

    if not handlers:
        root.addHandler(logging.NullHandler())

    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the provider's root logger."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
