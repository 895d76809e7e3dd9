"""Interactive utilities for CLI commands"""

from typing import Optional

from rich.console import Console
from rich.prompt import Confirm


class ConfirmPrompt:
    """y/N confirmation that can be forced to auto-accept"""

    def __init__(self, assume_yes: bool = False, console: Optional[Console] = None):
        self.assume_yes = assume_yes
        self.console = console or Console()

    def __call__(self, message: str) -> bool:
        if self.assume_yes:
            self.console.print(f"[dim]{message} (auto-confirmed)[/dim]")
            return True
        return Confirm.ask(message, default=False, console=self.console)
