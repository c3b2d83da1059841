"""
File-based result log
"""
from pathlib import Path
from typing import Iterable, List, Union

from ...domain.sync.models import SyncResult


class ResultLogWriter:
    """
    Append-only audit log of copy attempts.
    
    One semicolon-delimited line per SyncResult, see SyncResult.to_record().
    """
    
    def __init__(self, path: Union[str, Path]):
        """
        Initialize result log writer.
        
        Args:
            path: Log file, created on first write
        """
        self.path = Path(path).expanduser()
    
    def write(self, results: Iterable[SyncResult]) -> int:
        """Append results; returns the number of lines written"""
        lines = [r.to_record() for r in results]
        if not lines:
            return 0
        
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as fh:
            for line in lines:
                fh.write(line + "\n")
        return len(lines)
    
    def read(self) -> List[str]:
        """Read all stored records"""
        if not self.path.exists():
            return []
        return self.path.read_text(encoding="utf-8").splitlines()
