"""
Main CLI application
"""
import typer
from pathlib import Path
from typing import Optional

from ...core.logging import setup_logging, get_logger
from .sync import register_sync_commands

logger = get_logger(__name__)

# Create main app
app = typer.Typer(
    name="sharesync",
    add_completion=False,
    help="Copy files to the same path on remote Windows hosts over administrative shares",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register commands directly (not as subcommands)
register_sync_commands(app)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Log file path",
    ),
):
    """
    sharesync - distribute files to remote hosts
    
    Use subcommands to perform different operations:
    - push: Copy files to the target hosts
    - hosts: Show the resolved target hosts
    """
    # Setup logging
    setup_logging(level=log_level, log_file=log_file)


def run():
    """CLI entry point"""
    app()


if __name__ == "__main__":
    run()
