"""Shared Rich console for task-cli output.

Command results, success lines and errors all print through this console.
"""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = False) -> Console:
    """Return the cached console (highlighting off unless asked for)."""
    return Console(highlight=highlight)
