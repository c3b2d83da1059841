"""
Unified exception definitions
"""


class ShareSyncError(Exception):
    """Base exception class"""
    pass


class ConfigError(ShareSyncError):
    """Configuration error"""
    pass


class SyncError(ShareSyncError):
    """
    Sync error
    
    ``report`` holds the partial SyncReport when the run was already
    copying files, so completed results are not lost.
    """
    
    def __init__(self, message: str = "", report=None):
        super().__init__(message)
        self.report = report


class NoSourceFilesError(SyncError):
    """No source pattern resolved to an existing file"""
    pass


class NoTargetsError(SyncError):
    """Target scope is empty after excluding the local host"""
    pass


class SourceMissingError(SyncError):
    """A resolved source file disappeared before it was copied"""
    pass


class PathMappingError(SyncError):
    """Source path has neither a drive letter nor a share prefix"""
    pass
