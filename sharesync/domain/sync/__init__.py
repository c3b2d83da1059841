"""
Sync domain module
"""
from .models import (
    SourceFile,
    SyncResult,
    SyncOutcome,
    CopyError,
    Conflict,
    SyncPlan,
    FileReport,
    SyncReport,
    RunStatus,
)
from .orchestrator import SyncOrchestrator
from .paths import destination_path, destination_dir, map_to_host, is_share_path
from .scope import resolve_scope, is_local_host

__all__ = [
    "SourceFile",
    "SyncResult",
    "SyncOutcome",
    "CopyError",
    "Conflict",
    "SyncPlan",
    "FileReport",
    "SyncReport",
    "RunStatus",
    "SyncOrchestrator",
    "destination_path",
    "destination_dir",
    "map_to_host",
    "is_share_path",
    "resolve_scope",
    "is_local_host",
]
