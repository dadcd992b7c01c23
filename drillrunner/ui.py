"""Coloured status lines shown to the learner."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def use_emoji() -> bool:
    """Return False when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" not in os.environ


def _announce(symbol: str, message: str, colour: str) -> None:
    console = Console(highlight=False, soft_wrap=True)
    console.print(Text.assemble((symbol, colour), " ", (message, colour)))


def warn(message: str) -> None:
    """Print a red warning line."""
    _announce("⚠️ " if use_emoji() else "!", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _announce("✅" if use_emoji() else "✓", message, "green")