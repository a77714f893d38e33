"""Shared Rich console for CLI output."""

import json
import os
from functools import wraps
from typing import Any

from rich.console import Console
from rich.markup import escape

_error_console = Console(stderr=True)


def _should_print() -> bool:
    """Check if console output is enabled."""
    return os.environ.get("CODERFORGE_CONSOLE_ENABLED", "true").lower() == "true"


def _console_output(func):
    """Decorator to check if console output is enabled."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        if _should_print():
            return func(*args, **kwargs)

    return wrapper


@_console_output
def print_info(message: str) -> None:
    """Print info message."""
    _error_console.print(escape(message))


def print_error(message: str) -> None:
    """Print error message (always outputs)."""
    _error_console.print(f"[red]ERROR: {escape(message)}[/red]")


def print_json(data: Any) -> None:
    """Print JSON data to stdout (always outputs, ignores CODERFORGE_CONSOLE_ENABLED)."""
    print(json.dumps(data, indent=2))
