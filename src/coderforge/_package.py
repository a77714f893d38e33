"""Package metadata shared by the CLI and the provider root."""

PACKAGE_NAME = "terraform-provider-coderforge"
__version__ = "1.1.0"

# Registry address the host uses to locate this provider
PROVIDER_ADDRESS = "terraform.coderforge.org/coderforge/coderforge"
PROVIDER_TYPE_NAME = "coderforge"

DOCS_URL = "https://coderforge.org/docs/terraform"
