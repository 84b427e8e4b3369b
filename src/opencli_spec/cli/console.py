"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so that bootstrap paths
(``--help``, ``--version``) and the plain-text fallbacks keep working
when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any


def load_rich_console_class() -> type[Any] | None:
    """Return ``rich.console.Console``, or ``None`` when Rich is missing."""
    try:
        from rich.console import Console
    except ModuleNotFoundError:
        return None
    return Console


def get_rich_console(*, stderr: bool = False) -> Any | None:
    """Create a Rich console targeting stdout (or stderr), if available."""
    console_class = load_rich_console_class()
    if console_class is None:
        return None
    return console_class(stderr=stderr, highlight=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible stderr proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        rich_console = get_rich_console(stderr=True)
        if rich_console is None:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
