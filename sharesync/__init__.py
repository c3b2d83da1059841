"""
sharesync - distribute files to remote hosts over administrative shares

Copies local files to the same path on a list of remote servers:
- Wildcard source patterns
- Target scope without the local machine
- Timestamp check before overwriting newer remote copies
- One Success/Fail record per copy attempt
"""

__version__ = "0.1.0"

# Export domain models
from .domain.sync import (
    SyncOrchestrator,
    SourceFile,
    SyncResult,
    SyncOutcome,
    SyncReport,
    RunStatus,
    destination_path,
    destination_dir,
    resolve_scope,
)

# Export filesystem backends
from .infrastructure.fs.share_fs import NativeShareFileSystem, MountedShareFileSystem

__all__ = [
    # Version
    "__version__",
    # Orchestration
    "SyncOrchestrator",
    "SourceFile",
    "SyncResult",
    "SyncOutcome",
    "SyncReport",
    "RunStatus",
    # Path mapping
    "destination_path",
    "destination_dir",
    "resolve_scope",
    # Filesystem
    "NativeShareFileSystem",
    "MountedShareFileSystem",
]
