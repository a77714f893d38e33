"""Developer command line for the CoderForge.org provider.

The plugin host normally drives the provider directly; this entry point prints
what the host would negotiate so schemas can be inspected without it.
"""

import argparse
import sys
from typing import Any, Optional

from coderforge._package import DOCS_URL, PACKAGE_NAME, PROVIDER_ADDRESS, __version__
from coderforge.cli.console import print_error, print_info, print_json
from coderforge.config.manager import ConfigurationManager
from coderforge.config.schemas.app_schema import AppConfig
from coderforge.domain.base.exceptions import ConfigurationError
from coderforge.infrastructure.logging.logger import setup_logging
from coderforge.providers.coderforge.provider import CoderForgeProvider


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coderforge-provider",
        description=f"{PACKAGE_NAME} - CoderForge.org Terraform provider",
        epilog=f"Documentation: {DOCS_URL}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--config", help="Path to a JSON or YAML configuration file")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("schema", help="Print provider and resource schemas as JSON")
    subparsers.add_parser("version", help="Print the provider address and version")
    return parser


def schema_document(provider: CoderForgeProvider) -> dict[str, Any]:
    """Collect the provider and resource schemas the host would negotiate."""
    type_name = provider.metadata().type_name
    resource_schemas = {}
    for factory in provider.resources():
        resource = factory()
        resource_schemas[resource.metadata(type_name).type_name] = resource.schema().to_dict()
    return {
        "provider": provider.schema().to_dict(),
        "resource_schemas": resource_schemas,
        "data_source_schemas": {},
    }


def main(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        manager = ConfigurationManager.from_environment(args.config)
        app_config = manager.get_typed(AppConfig)
    except (ConfigurationError, FileNotFoundError) as e:
        print_error(str(e))
        return 1

    if args.debug:
        app_config = app_config.model_copy(
            update={"logging": app_config.logging.model_copy(update={"level": "DEBUG"})}
        )
    setup_logging(app_config.logging)
    if args.debug and manager.config_file_path:
        print_info(f"Loaded configuration from {manager.config_file_path}")

    provider = CoderForgeProvider(version=__version__, app_config=app_config)
    if args.command == "schema":
        print_json(schema_document(provider))
    elif args.command == "version":
        print_json({"address": PROVIDER_ADDRESS, "version": provider.metadata().version})
    return 0


if __name__ == "__main__":
    sys.exit(main())
