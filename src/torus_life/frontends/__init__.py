"""Frontend interfaces for the universe."""

from .cli import CLIUniverse

__all__ = ["CLIUniverse"]
