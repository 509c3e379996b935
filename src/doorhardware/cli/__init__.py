"""Command-line interface for door hardware placement."""

from doorhardware.cli.main import app

__all__ = ["app"]
