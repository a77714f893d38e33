"""HTTP client for the CoderForge.org API."""

from coderforge.infrastructure.http.client import CONTEXT_HEADER, CoderForgeClient

__all__: list[str] = ["CONTEXT_HEADER", "CoderForgeClient"]
