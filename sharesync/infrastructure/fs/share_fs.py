"""
Share filesystem implementations
"""
import glob
import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import List, Union

from ...core.constants import PATH_SEPARATOR, UNC_PREFIX
from ...core.interfaces import ShareFileSystem
from ...domain.sync.paths import is_share_path, split_share_path


class NativeShareFileSystem(ShareFileSystem):
    """
    Operating system filesystem.
    
    Share paths are handed to the OS unchanged, which is what Windows
    expects for ``\\\\host\\C$\\...``.
    """
    
    def glob(self, pattern: str) -> List[str]:
        return sorted(glob.glob(os.path.expanduser(pattern), recursive=True))
    
    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)
    
    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)
    
    def mtime(self, path: str) -> datetime:
        return datetime.fromtimestamp(os.path.getmtime(path))
    
    def makedirs(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)
    
    def copy(self, source: str, destination: str) -> None:
        # copyfile refuses a directory destination; copystat keeps the mtime
        # so an unchanged file never shows as a conflict
        shutil.copyfile(source, destination)
        shutil.copystat(source, destination)


class MountedShareFileSystem(NativeShareFileSystem):
    """
    Filesystem where remote shares are mounted below one directory.
    
    ``\\\\host\\share\\rest`` is accessed as ``<mount_root>/host/share/rest``,
    e.g. CIFS mounts on a Linux admin box. Other paths are used as given.
    """
    
    def __init__(self, mount_root: Union[str, Path]):
        """
        Initialize mounted share filesystem.
        
        Args:
            mount_root: Directory holding one subdirectory per host
        """
        self.mount_root = Path(mount_root).expanduser()
    
    def to_local(self, path: str) -> str:
        """Translate a share path to its mount location"""
        if not is_share_path(path):
            return path
        host, remainder = split_share_path(path)
        return str(self.mount_root.joinpath(host, *remainder.split(PATH_SEPARATOR)))
    
    def to_share(self, path: str) -> str:
        """Translate a mount location back to its share path"""
        try:
            rel = Path(path).relative_to(self.mount_root)
        except ValueError:
            return path
        if len(rel.parts) < 2:
            return path
        return UNC_PREFIX + PATH_SEPARATOR.join(rel.parts)
    
    def glob(self, pattern: str) -> List[str]:
        return sorted(self.to_share(p) for p in super().glob(self.to_local(pattern)))
    
    def is_file(self, path: str) -> bool:
        return super().is_file(self.to_local(path))
    
    def is_dir(self, path: str) -> bool:
        return super().is_dir(self.to_local(path))
    
    def mtime(self, path: str) -> datetime:
        return super().mtime(self.to_local(path))
    
    def makedirs(self, path: str) -> None:
        super().makedirs(self.to_local(path))
    
    def copy(self, source: str, destination: str) -> None:
        super().copy(self.to_local(source), self.to_local(destination))
