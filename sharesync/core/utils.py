"""
Core utility functions
"""
import socket
import paramiko
from pathlib import Path
from typing import List, Optional

from .constants import SSH_CONFIG_PATH
from .exceptions import ConfigError


# ============================================================
# SSH Config Management
# ============================================================

def load_known_hosts(config_path: Optional[Path] = None) -> List[str]:
    """
    Load concrete Host names from ~/.ssh/config.
    
    Wildcard and negated patterns (``*``, ``?``, ``!``) are skipped since
    they do not name a single machine.
    
    Args:
        config_path: SSH config file, defaults to ~/.ssh/config
    
    Returns:
        Host names, sorted
    
    Raises:
        ConfigError: If the SSH config file doesn't exist
    """
    path = Path(config_path or SSH_CONFIG_PATH).expanduser()
    if not path.exists():
        raise ConfigError(f"{path} does not exist")

    ssh_config = paramiko.SSHConfig.from_path(str(path))

    hosts = []
    for name in sorted(ssh_config.get_hostnames()):
        if any(ch in name for ch in "*?!"):
            continue
        hosts.append(name)
    return hosts


# ============================================================
# Host Utilities
# ============================================================

def get_local_host_name() -> str:
    """Short name of the current machine (domain suffix stripped)"""
    return socket.gethostname().split(".")[0]


def read_host_list(path: Path) -> List[str]:
    """
    Read target hosts from a text file, one per line.
    
    Blank lines are skipped and ``#`` starts a comment.
    
    Raises:
        ConfigError: If the file doesn't exist
    """
    path = Path(path).expanduser()
    if not path.exists():
        raise ConfigError(f"Targets file not found: {path}")

    hosts = []
    for line in path.read_text(encoding="utf-8").splitlines():
        name = line.split("#", 1)[0].strip()
        if name:
            hosts.append(name)
    return hosts
