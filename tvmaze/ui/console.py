"""Console UI wrapper using Rich library."""

import json
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape


class ConsoleUI:
    """
    Wrapper for Rich Console providing styled output methods.

    Results go to stdout, messages to stderr, so JSON output can be
    piped without the status lines.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None
    ) -> None:
        """Initialize with Rich Consoles for results and messages."""
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def print_json(self, data: Any) -> None:
        """Pretty-print a decoded JSON payload."""
        self.console.print_json(json.dumps(data, ensure_ascii=False))

    def print_url(self, url: str) -> None:
        """Print a URL verbatim (no markup, no highlighting)."""
        self.console.print(url, markup=False, highlight=False, soft_wrap=True)

    def print_info(self, message: str) -> None:
        """Print an info message with blue styling."""
        self.err_console.print(f"[blue]ℹ️  {escape(message)}[/blue]")

    def print_error(self, message: str) -> None:
        """Print an error message with red styling."""
        self.err_console.print(f"[red]❌ {escape(message)}[/red]")
