"""Utility modules for cleanpath.

This module exports commonly used utility functions.
"""

from cleanpath.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    printable,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "printable",
]
