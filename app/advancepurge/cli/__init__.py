"""CLI package for advancepurge.

This package contains the Typer application.
"""

from advancepurge.cli.main import app

__all__ = ["app"]
