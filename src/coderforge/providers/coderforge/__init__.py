"""CoderForge.org provider implementation."""

from coderforge.providers.coderforge.provider import CoderForgeProvider, new_provider

__all__: list[str] = ["CoderForgeProvider", "new_provider"]
