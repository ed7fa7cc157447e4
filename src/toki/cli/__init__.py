"""CLI module for toki.

This module provides:
- Main CLI application entry point
- Hidden man page generation
"""

from toki.cli.main import app, run_timer

__all__ = [
    "app",
    "run_timer",
]
