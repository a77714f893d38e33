"""Configuration package - schemas and loading."""

from coderforge.config.manager import ConfigurationManager
from coderforge.config.schemas import AppConfig, ClientConfig, LoggingConfig

__all__: list[str] = ["AppConfig", "ClientConfig", "ConfigurationManager", "LoggingConfig"]
