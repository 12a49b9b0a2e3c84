"""Command line interface for Patro."""

from patro.cli.main import cli

__all__ = ["cli"]
