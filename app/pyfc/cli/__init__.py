"""CLI package for pyfc.

This package contains the Typer application, switch parsing and
result rendering.
"""

from pyfc.cli.main import app

__all__ = ["app"]
