"""
Sync configuration parser
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Optional

from ...core.exceptions import ConfigError
from ...core.utils import get_local_host_name, load_known_hosts, read_host_list


@dataclass
class SyncSettings:
    """Resolved inputs for one sync run"""
    sources: List[str] = field(default_factory=list)
    targets: List[str] = field(default_factory=list)
    local_host: str = ""
    mount_root: Optional[str] = None
    result_log: Optional[str] = None


def _string_list(cfg: Dict[str, Any], key: str) -> List[str]:
    """Read a string or list of strings"""
    value = cfg.get(key, [])
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a string or a list of strings")
    return list(value)


def resolve_relative(path: str, config_file_path: Optional[Path]) -> Path:
    """
    Resolve path relative to the configuration file directory.
    
    Absolute paths and paths starting with ~ are not modified.
    """
    resolved = Path(path).expanduser()
    if config_file_path and not resolved.is_absolute():
        return config_file_path.parent / resolved
    return resolved


def parse_targets(
    cfg: Dict[str, Any],
    config_file_path: Optional[Path] = None,
    ssh_config_path: Optional[Path] = None,
) -> List[str]:
    """
    Collect target hosts.
    
    Sources, in order: ``targets`` list, ``targets_file``, and, only when
    both are empty and ``ssh_hosts`` is set, the Host entries of the SSH
    config.
    """
    targets = _string_list(cfg, "targets")
    
    if cfg.get("targets_file"):
        targets.extend(read_host_list(resolve_relative(cfg["targets_file"], config_file_path)))
    
    if not targets and cfg.get("ssh_hosts"):
        targets = load_known_hosts(ssh_config_path)
    
    return targets


def parse_sync_settings(
    cfg: Dict[str, Any],
    config_file_path: Optional[Path] = None,
    ssh_config_path: Optional[Path] = None,
) -> SyncSettings:
    """Parse merged configuration into SyncSettings"""
    return SyncSettings(
        sources=_string_list(cfg, "sources"),
        targets=parse_targets(cfg, config_file_path, ssh_config_path),
        local_host=cfg.get("local_host") or get_local_host_name(),
        mount_root=cfg.get("mount_root"),
        result_log=cfg.get("result_log"),
    )
