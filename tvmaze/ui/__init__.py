"""User interface components."""

from tvmaze.ui.console import ConsoleUI

__all__ = ["ConsoleUI"]
