"""
Core interfaces for dependency injection
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List


class ShareFileSystem(ABC):
    """
    Filesystem boundary used by the sync orchestrator.
    
    Paths are plain strings: local sources use drive-letter or share
    notation, destinations are always share paths (\\\\host\\share\\...).
    """
    
    @abstractmethod
    def glob(self, pattern: str) -> List[str]:
        """Expand a wildcard pattern into existing paths"""
        pass
    
    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Check if path is an existing regular file"""
        pass
    
    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Check if path is an existing directory"""
        pass
    
    @abstractmethod
    def mtime(self, path: str) -> datetime:
        """Get last modification time of an existing file"""
        pass
    
    @abstractmethod
    def makedirs(self, path: str) -> None:
        """Create directory and any missing parents"""
        pass
    
    @abstractmethod
    def copy(self, source: str, destination: str) -> None:
        """Copy file contents and timestamps, overwriting the destination"""
        pass


class PromptProvider(ABC):
    """User prompt interface"""
    
    @abstractmethod
    def confirm(self, message: str) -> bool:
        """Ask a yes/no question until answered"""
        pass
