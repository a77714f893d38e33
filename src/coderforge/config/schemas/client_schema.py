"""HTTP client configuration schema."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_HOST_URL = "http://localhost:8073"
DEFAULT_API_PATH = "/api/1.2/cloud/terraform/resource"


class ClientConfig(BaseModel):
    """Settings for the CoderForge.org API client."""

    host_url: str = Field(DEFAULT_HOST_URL, description="Base URL of the CoderForge.org API")
    api_path: str = Field(DEFAULT_API_PATH, description="Path of the terraform resource endpoint")
    timeout_seconds: float = Field(10.0, gt=0, description="Timeout for each API request")
    context: dict[str, Any] = Field(
        default_factory=lambda: {"userId": "u00001"},
        description="Identity context sent in the X-CoderForge.org-Context header",
    )

    @field_validator("host_url")
    @classmethod
    def validate_host_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"host_url must start with http:// or https://, got '{v}'")
        return v.rstrip("/")
