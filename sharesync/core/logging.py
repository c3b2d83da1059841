"""
Logging and console output

Log records go to stderr through Rich, and optionally to a plain text file.
Status lines for the operator go through the stdout console.
"""
import logging
from typing import Optional
from pathlib import Path

from rich.logging import RichHandler
from rich.console import Console
from rich.traceback import install as install_traceback


FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Consoles resolve sys.stdout / sys.stderr at print time, so redirected
# streams (CliRunner, pipes) still receive the output
_stdout_console = Console()
_stderr_console = Console(stderr=True)


def _rich_handler(level: int, tracebacks: bool) -> logging.Handler:
    handler = RichHandler(
        console=_stderr_console,
        show_path=level <= logging.DEBUG,
        rich_tracebacks=tracebacks,
        markup=False,
    )
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    return handler


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[Path] = None,
    rich_tracebacks: bool = True,
) -> None:
    """
    Route all sharesync logging through the root logger.

    Calling it again replaces the handlers of the previous call.

    Args:
        level: Level name; unknown names fall back to WARNING
        log_file: Also append plain records to this file
        rich_tracebacks: Render uncaught exceptions with Rich
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    if rich_tracebacks:
        install_traceback(console=_stderr_console, show_locals=False)

    handlers = [_rich_handler(log_level, rich_tracebacks)]
    if log_file:
        handlers.append(_file_handler(log_file, log_level))

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers[:] = handlers


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_stdout_console() -> Console:
    """Console for operator-facing output"""
    return _stdout_console


def get_stderr_console() -> Console:
    """Console for errors and log records"""
    return _stderr_console
