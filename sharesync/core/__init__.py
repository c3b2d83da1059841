"""
Core infrastructure layer
"""
from .constants import *
from .exceptions import *
from .logging import setup_logging, get_logger, get_stdout_console, get_stderr_console
from .interfaces import ShareFileSystem, PromptProvider
from .utils import load_known_hosts, get_local_host_name, read_host_list

__all__ = [
    "setup_logging",
    "get_logger",
    "get_stdout_console",
    "get_stderr_console",
    "ShareFileSystem",
    "PromptProvider",
    "load_known_hosts",
    "get_local_host_name",
    "read_host_list",
]
