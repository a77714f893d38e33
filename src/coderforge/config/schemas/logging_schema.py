"""Logging configuration schema."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Log level")
    file_path: Optional[str] = Field(None, description="Optional log file path")
    console_enabled: bool = Field(True, description="Write logs to stderr")
    format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log record format",
    )
    mask_sensitive: bool = Field(True, description="Mask registered secrets in log records")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in VALID_LEVELS:
            raise ValueError(f"Invalid log level '{v}', expected one of {', '.join(VALID_LEVELS)}")
        return level
