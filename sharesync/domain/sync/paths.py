"""
Destination path mapping for administrative shares.

A file is copied to the same place on every target host:

- ``C:\\Tools\\app.cfg``            -> ``\\\\HOST\\C$\\Tools\\app.cfg``
- ``\\\\fs01\\deploy\\app\\app.cfg`` -> ``\\\\HOST\\deploy\\app\\app.cfg``

Forward slashes are accepted on input; output always uses backslashes.
"""
import re

from ...core.constants import ADMIN_SHARE_SUFFIX, PATH_SEPARATOR, UNC_PREFIX
from ...core.exceptions import PathMappingError

_DRIVE_RE = re.compile(r"^(?P<drive>[A-Za-z]):(?P<rest>(\\.*)?)$")


def normalize(path: str) -> str:
    """Use backslashes throughout"""
    return path.replace("/", PATH_SEPARATOR)


def is_share_path(path: str) -> bool:
    """Check if path is a UNC path (\\\\host\\share...)"""
    return normalize(path).startswith(UNC_PREFIX)


def split_share_path(path: str) -> tuple[str, str]:
    """
    Split a UNC path into (host, remainder).
    
    The remainder starts with the share name and keeps every later
    segment verbatim.
    
    Raises:
        PathMappingError: If the path has no host or no share segment
    """
    parts = normalize(path).split(PATH_SEPARATOR)
    # ['', '', host, share, ...]
    if len(parts) < 4 or not parts[2] or not parts[3]:
        raise PathMappingError(f"Incomplete share path: {path}")
    return parts[2], PATH_SEPARATOR.join(parts[3:]).rstrip(PATH_SEPARATOR)


def share_remainder(path: str) -> str:
    """
    Host-independent part of the destination path.
    
    ``C:\\Tools\\a.cfg`` gives ``C$\\Tools\\a.cfg``; a UNC path gives
    everything after its own host.
    
    Raises:
        PathMappingError: If the path is neither a drive path nor a UNC path
    """
    norm = normalize(path)

    if norm.startswith(UNC_PREFIX):
        _, remainder = split_share_path(norm)
        return remainder

    match = _DRIVE_RE.match(norm)
    if match is None:
        raise PathMappingError(
            f"Cannot map '{path}': expected a drive letter (C:\\...) or a share path (\\\\host\\share\\...)"
        )

    share = match.group("drive") + ADMIN_SHARE_SUFFIX
    rest = match.group("rest").strip(PATH_SEPARATOR)
    return f"{share}{PATH_SEPARATOR}{rest}" if rest else share


def map_to_host(path: str, host: str) -> str:
    """Map a local or share path onto the given target host"""
    if not host:
        raise PathMappingError("Target host name is empty")
    return f"{UNC_PREFIX}{host}{PATH_SEPARATOR}{share_remainder(path)}"


def destination_path(source_path: str, host: str) -> str:
    """Full destination file path on host"""
    return map_to_host(source_path, host)


def destination_dir(source_directory: str, host: str) -> str:
    """Destination directory on host (destination_path minus the file name)"""
    return map_to_host(source_directory, host)
