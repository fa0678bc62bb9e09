"""gitstream CLI."""

from gitstream.cli.main import cli

__all__ = ["cli"]
