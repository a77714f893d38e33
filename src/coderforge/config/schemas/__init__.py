"""Configuration schemas."""

from coderforge.config.schemas.app_schema import AppConfig
from coderforge.config.schemas.client_schema import DEFAULT_API_PATH, DEFAULT_HOST_URL, ClientConfig
from coderforge.config.schemas.logging_schema import LoggingConfig

__all__: list[str] = [
    "DEFAULT_API_PATH",
    "DEFAULT_HOST_URL",
    "AppConfig",
    "ClientConfig",
    "LoggingConfig",
]
