"""Top-level application configuration schema."""

from pydantic import BaseModel, Field

from coderforge.config.schemas.client_schema import ClientConfig
from coderforge.config.schemas.logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Provider process configuration."""

    client: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
