"""Diagnostics console with stderr discipline.

gafeed never writes to stdout: response bodies belong to the caller. Request
traces go to stderr through a Rich :class:`~rich.console.Console`, with
colour disabled when ``NO_COLOR`` is set, ``TERM=dumb``, or the manager is
created with ``no_color=True``.

The module exposes two layers:

1. :class:`OutputManager` -- holds the console and the verbose flag.
   Install a configured one with :func:`set_output`.
2. :func:`debug` -- delegates to the global manager. It is the default
   request trace sink of :class:`~gafeed.client.engine.RequestEngine`, so
   traces are visible only in verbose mode.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape


class OutputManager:
    """Central manager for diagnostic output on stderr.

    Args:
        no_color: Disable all colour and Rich markup.
        verbose: Enable debug messages (request traces).
    """

    def __init__(self, no_color: bool = False, verbose: bool = False) -> None:
        self._no_color = no_color or _should_disable_color()
        self._verbose = verbose
        self._stderr = Console(
            file=sys.stderr,
            no_color=self._no_color,
            stderr=True,
        )

    @property
    def is_verbose(self) -> bool:
        """Whether verbose mode is enabled."""
        return self._verbose

    def debug(self, message: str) -> None:
        """Print a debug message. Only shown in verbose mode.

        Messages are escaped before rendering: request traces contain text
        such as ``<Response [200 OK]>`` that Rich would otherwise read as
        markup.
        """
        if self._verbose:
            if self._no_color:
                print(f"[debug] {message}", file=sys.stderr, flush=True)
            else:
                self._stderr.print(f"[dim]debug: {escape(message)}[/dim]")


def _should_disable_color() -> bool:
    """Return True when ``NO_COLOR`` is set (any value) or ``TERM=dumb``."""
    if os.environ.get("NO_COLOR") is not None:
        return True
    if os.environ.get("TERM") == "dumb":
        return True
    return False


# ------------------------------------------------------------------ #
# Global output instance
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the global :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    """Install *output* as the global :class:`OutputManager`."""
    global _output
    _output = output


def reset_output() -> None:
    """Reset the global :class:`OutputManager` to ``None``.

    Primarily useful in test suites to ensure a clean state between tests.
    """
    global _output
    _output = None


def debug(message: str) -> None:
    """Print debug message to stderr via the global OutputManager."""
    get_output().debug(message)
