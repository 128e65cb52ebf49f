"""Command-line interface for climg."""

from climg.cli.app import create_app
from climg.cli.main import main

__all__ = ["create_app", "main"]
