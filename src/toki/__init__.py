"""toki - a countdown timer with many features.

Runs one or more timed stages in sequence, each shown as a live countdown
and progress bar.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
