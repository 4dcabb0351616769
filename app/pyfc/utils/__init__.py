"""Utility modules for pyfc.

This module exports the shared consoles and print helpers.
"""

from pyfc.utils.formatting import console, err_console, print_error, print_plain

__all__ = ["console", "err_console", "print_error", "print_plain"]
