"""CoderForge.org provider - Terraform plugin for CoderForge.org cloud resources.

The provider maps declarative ``function`` and ``container`` resources onto the
CoderForge.org cloud-management REST API. It is loaded and driven by a plugin
host, which negotiates the schema, configures the provider once and then calls
create, read, update and delete on the resource mappers.

Key Components:
    - config: configuration schemas and loading
    - domain: wire models, host contract objects, ports and exceptions
    - infrastructure: logging and the HTTP client
    - providers: the provider root and its resource mappers
    - cli: developer entry point
"""

from coderforge._package import PROVIDER_ADDRESS, PROVIDER_TYPE_NAME, __version__

__all__: list[str] = ["PROVIDER_ADDRESS", "PROVIDER_TYPE_NAME", "__version__"]
