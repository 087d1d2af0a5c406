"""Frontend interfaces for the board engine."""

from .terminal import TerminalRenderer, run_loop
from .cli import main

__all__ = ["TerminalRenderer", "run_loop", "main"]
