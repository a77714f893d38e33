"""Logging infrastructure."""

from coderforge.infrastructure.logging.logger import (
    SensitiveDataFilter,
    get_logger,
    register_secret,
    setup_logging,
)

__all__: list[str] = ["SensitiveDataFilter", "get_logger", "register_secret", "setup_logging"]
