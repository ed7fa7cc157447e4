"""
CLI commands module.

Command submodules are imported directly by main.py to avoid circular imports.
"""

__all__ = [
    "man",
]
