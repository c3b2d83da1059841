"""
Rich-based user prompts
"""
from typing import Optional
from rich.console import Console
from rich.prompt import Confirm

from ...core.interfaces import PromptProvider
from ...core.logging import get_stdout_console


class RichPromptProvider(PromptProvider):
    """Rich-based prompt provider"""
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_stdout_console()
    
    def confirm(self, message: str) -> bool:
        """
        Prompt user for confirmation.
        
        There is no default: only y/n (any case) is accepted and anything
        else, including an empty line, asks again.
        """
        return Confirm.ask(message, console=self.console)
    
    def success(self, message: str) -> None:
        """Display success message"""
        self.console.print(f"[green]✓[/green] {message}")
    
    def warning(self, message: str) -> None:
        """Display warning message"""
        self.console.print(f"[yellow]⚠[/yellow] {message}")
    
    def error(self, message: str) -> None:
        """Display error message"""
        self.console.print(f"[red]✗[/red] {message}")
