"""Logging adapter implementing LoggingPort."""

import logging
from typing import Any

from coderforge.domain.base.ports.logging_port import LoggingPort
from coderforge.infrastructure.logging.logger import get_logger

# Caller -> public method -> _log -> Logger.log
_CALLER_STACKLEVEL = 3


class LoggingAdapter(LoggingPort):
    """
    LoggingPort backed by a logger under the ``coderforge`` root.

    Records report the file and line of the component that logged, not of the
    adapter, so log output points at the client or resource that failed.
    """

    def __init__(self, name: str = "provider") -> None:
        self._logger = get_logger(name)

    def _log(self, level: int, message: str, args: tuple, kwargs: dict[str, Any]) -> None:
        kwargs.setdefault("stacklevel", _CALLER_STACKLEVEL)
        self._logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, args, kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, message, args, kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, args, kwargs)

    def exception(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log at error level with the traceback of the exception being handled."""
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, message, args, kwargs)
