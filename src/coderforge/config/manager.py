"""Configuration manager - loads provider process settings from file and environment."""

import copy
import json
import os
from pathlib import Path
from typing import Any, Optional, TypeVar

import yaml
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from coderforge.config.schemas.app_schema import AppConfig
from coderforge.domain.base.exceptions import ConfigurationError

T = TypeVar("T", bound=BaseModel)

CONFIG_FILE_ENV = "CODERFORGE_CONFIG_FILE"

# Environment variable -> dotted configuration key
ENV_OVERRIDES: dict[str, str] = {
    "CODERFORGE_HOST_URL": "client.host_url",
    "CODERFORGE_LOG_LEVEL": "logging.level",
    "CODERFORGE_LOG_FILE": "logging.file_path",
}


class ConfigurationManager:
    """
    Holds raw configuration data and builds typed configuration objects.

    Values are resolved in order: environment overrides, then the loaded
    file or dictionary, then the schema defaults.
    """

    def __init__(self) -> None:
        self._config: dict[str, Any] = {}
        self._config_file_path: Optional[str] = None

    @classmethod
    def from_environment(cls, config_path: Optional[str] = None) -> "ConfigurationManager":
        """
        Create a manager, loading the file named by ``config_path`` or by
        ``CODERFORGE_CONFIG_FILE`` when either is set.
        """
        manager = cls()
        path = config_path or os.environ.get(CONFIG_FILE_ENV)
        if path:
            manager.load_from_file(path)
        return manager

    def load_from_dict(self, data: dict[str, Any]) -> None:
        """Replace the configuration with a copy of ``data``."""
        self._config = copy.deepcopy(data)

    def load_from_file(self, path: str) -> None:
        """
        Load configuration from a JSON or YAML file.

        Args:
            path: Path to a ``.json``, ``.yaml`` or ``.yml`` file

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If the file cannot be parsed or is not a mapping
        """
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        try:
            with open(file_path) as f:
                if file_path.suffix.lower() in (".yaml", ".yml"):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Invalid configuration file {path}: {e}", details={"path": path}
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping", details={"path": path}
            )

        self._config = data
        self._config_file_path = str(file_path)

    @property
    def config_file_path(self) -> Optional[str]:
        return self._config_file_path

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a value by dotted key, e.g. ``client.host_url``.

        Args:
            key: Dotted path into the configuration
            default: Value returned when the key is absent
        """
        node: Any = self._effective()
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_typed(self, schema_cls: type[T] = AppConfig) -> T:  # type: ignore[assignment]
        """
        Validate the effective configuration against a pydantic schema.

        Raises:
            ConfigurationError: If validation fails
        """
        try:
            return schema_cls.model_validate(self._effective())
        except PydanticValidationError as e:
            problems = [
                f"{' -> '.join(str(x) for x in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise ConfigurationError(
                "Invalid configuration: " + "; ".join(problems),
                details={"errors": problems, "path": self._config_file_path},
            ) from e

    def _effective(self) -> dict[str, Any]:
        config = copy.deepcopy(self._config)
        for env_name, key in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                _set_dotted(config, key, value)
        return config

    def __repr__(self) -> str:
        return f"ConfigurationManager(config_file_path={self._config_file_path!r})"


def _set_dotted(data: dict[str, Any], key: str, value: Any) -> None:
    parts = key.split(".")
    node = data
    for part in parts[:-1]:
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    node[parts[-1]] = value
