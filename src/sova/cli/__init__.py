"""Command-line interface for sova."""

from sova.cli.app import app

__all__ = ["app"]
