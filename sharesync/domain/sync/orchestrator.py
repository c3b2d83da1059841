"""
Sync orchestrator - business logic
"""
import ntpath
import re
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from ...core.exceptions import NoSourceFilesError, NoTargetsError, SourceMissingError
from ...core.interfaces import PromptProvider, ShareFileSystem
from ...core.logging import get_logger
from .models import (
    Conflict,
    CopyError,
    FileReport,
    RunStatus,
    SourceFile,
    SyncOutcome,
    SyncPlan,
    SyncReport,
    SyncResult,
)
from .paths import destination_dir, destination_path, share_remainder
from .scope import resolve_scope

logger = get_logger(__name__)

_DRIVE_ROOT_RE = re.compile(r"^[A-Za-z]:[\\/]$")


class SyncOrchestrator:
    """
    Copies local files to the same path on a list of remote hosts.

    Sequential and blocking: one file at a time, one target at a time.
    No dependency on CLI, Typer, or the real file system.
    """

    def __init__(
        self,
        filesystem: ShareFileSystem,
        prompt: PromptProvider,
        local_host: str,
        clock: Callable[[], datetime] = datetime.now,
        on_plan: Optional[Callable[[SyncPlan], None]] = None,
        on_conflict: Optional[Callable[[Conflict], None]] = None,
        on_missing_destination: Optional[Callable[[SourceFile, str, str], None]] = None,
        on_result: Optional[Callable[[SyncResult], None]] = None,
    ):
        """
        Initialize sync orchestrator.

        Args:
            filesystem: Access to local sources and remote shares
            prompt: Yes/no confirmation provider
            local_host: Name of the current machine, never used as a target
            clock: Source of the run timestamp
            on_plan: Callback with the resolved plan, before the first prompt
            on_conflict: Callback per destination newer than its source
            on_missing_destination: Callback when a destination directory
                cannot be created (source, host, directory)
            on_result: Callback per copy attempt
        """
        self.filesystem = filesystem
        self.prompt = prompt
        self.local_host = local_host
        self.clock = clock
        self.on_plan = on_plan
        self.on_conflict = on_conflict
        self.on_missing_destination = on_missing_destination
        self.on_result = on_result

    # ============================================================
    # Resolution
    # ============================================================

    def resolve_sources(self, patterns: Iterable[str]) -> List[SourceFile]:
        """Expand patterns into existing files, sorted by name"""
        found = {}
        for pattern in patterns:
            for path in self.filesystem.glob(pattern):
                if path in found or not self.filesystem.is_file(path):
                    continue
                directory, name = ntpath.split(path)
                if not _DRIVE_ROOT_RE.match(directory):
                    directory = directory.rstrip("\\/")
                found[path] = SourceFile(
                    path=path,
                    directory=directory,
                    name=name,
                    mtime=self.filesystem.mtime(path),
                )
        return sorted(found.values(), key=lambda f: (f.name.casefold(), f.path.casefold()))

    def plan(self, patterns: Iterable[str], targets: Iterable[str]) -> SyncPlan:
        """
        Resolve source files and target scope.

        Raises:
            NoSourceFilesError: If no pattern matches an existing file
            NoTargetsError: If no target remains after excluding the local host
            PathMappingError: If a source path cannot be mapped to a share
        """
        patterns = list(patterns)
        files = self.resolve_sources(patterns)
        if not files:
            raise NoSourceFilesError(f"No source files found for: {', '.join(patterns)}")

        scope = resolve_scope(targets, self.local_host)
        if not scope:
            raise NoTargetsError(f"No target hosts in scope (local host '{self.local_host}' excluded)")

        for source in files:
            share_remainder(source.path)

        return SyncPlan(files=files, targets=scope)

    # ============================================================
    # Run
    # ============================================================

    def run(self, patterns: Iterable[str], targets: Iterable[str]) -> SyncReport:
        """
        Execute the sync.

        Process:
        1. Resolve sources and targets
        2. Confirm the whole operation
        3. Per file: check conflicts, confirm overwrite, copy to each target

        Returns:
            Report with status DECLINED if the operator answered no at
            any prompt, COMPLETED otherwise

        Raises:
            SyncError: On any fatal condition (see plan() and SourceMissingError);
                once copying has started the exception carries the partial
                report in ``report``
        """
        started = self.clock()
        plan = self.plan(patterns, targets)
        report = SyncReport(status=RunStatus.COMPLETED, started=started, plan=plan)

        if self.on_plan:
            self.on_plan(plan)

        if not self.prompt.confirm(
            f"Copy {len(plan.files)} file(s) to {len(plan.targets)} target(s)?"
        ):
            logger.info("Sync declined by operator")
            report.status = RunStatus.DECLINED
            return report

        for source in plan.files:
            self._revalidate(source, plan.targets, report)

            file_report = FileReport(source=source)
            report.files.append(file_report)

            file_report.conflicts = self._find_conflicts(source, plan.targets)
            if file_report.conflicts and not self.prompt.confirm(
                f"Overwrite {len(file_report.conflicts)} newer file(s) with older {source.name}?"
            ):
                logger.info(f"Overwrite of {source.name} declined by operator")
                report.status = RunStatus.DECLINED
                return report

            self._copy_to_targets(file_report, plan.targets, started)

        return report

    # ============================================================
    # Per-file Steps
    # ============================================================

    def _revalidate(self, source: SourceFile, targets: List[str], report: SyncReport) -> None:
        """Raise with the partial report attached, so finished copies survive"""
        if not self.filesystem.is_file(source.path):
            report.status = RunStatus.FAILED
            raise SourceMissingError(f"Source file no longer exists: {source.path}", report=report)
        if not targets:
            report.status = RunStatus.FAILED
            raise NoTargetsError("No target hosts in scope", report=report)

    def _find_conflicts(self, source: SourceFile, targets: List[str]) -> List[Conflict]:
        """Collect destinations strictly newer than the source"""
        conflicts = []
        for host in targets:
            dest = destination_path(source.path, host)
            if not self.filesystem.is_file(dest):
                continue
            try:
                dest_mtime = self.filesystem.mtime(dest)
            except OSError as e:
                logger.debug(f"Cannot read mtime of {dest}: {e}")
                continue
            if dest_mtime > source.mtime:
                conflict = Conflict(
                    source=source,
                    host=host,
                    destination=dest,
                    destination_mtime=dest_mtime,
                )
                conflicts.append(conflict)
                logger.debug(f"[conflict] {dest} ({dest_mtime}) newer than {source.path} ({source.mtime})")
                if self.on_conflict:
                    self.on_conflict(conflict)
        return conflicts

    def _ensure_dir(self, directory: str) -> bool:
        """Create directory if missing; report whether it exists afterwards"""
        if self.filesystem.is_dir(directory):
            return True
        try:
            self.filesystem.makedirs(directory)
        except OSError as e:
            logger.debug(f"Cannot create {directory}: {e}")
        return self.filesystem.is_dir(directory)

    def _copy_to_targets(self, file_report: FileReport, targets: List[str], started: datetime) -> None:
        source = file_report.source
        for host in targets:
            dest_dir = destination_dir(source.directory, host)
            if not self._ensure_dir(dest_dir):
                logger.debug(f"[missing] {dest_dir}")
                file_report.missing_destinations.append(host)
                if self.on_missing_destination:
                    self.on_missing_destination(source, host, dest_dir)
                continue

            dest = destination_path(source.path, host)
            try:
                self.filesystem.copy(source.path, dest)
            except OSError as e:
                logger.warning(f"[copy] {source.path} → {dest} failed: {e}")
                result = SyncResult(
                    timestamp=started,
                    outcome=SyncOutcome.FAIL,
                    source=source.path,
                    destination=dest,
                    host=host,
                    error=CopyError.from_exception(e),
                )
            else:
                logger.debug(f"[copy] {source.path} → {dest}")
                result = SyncResult(
                    timestamp=started,
                    outcome=SyncOutcome.SUCCESS,
                    source=source.path,
                    destination=dest,
                    host=host,
                )

            file_report.results.append(result)
            if self.on_result:
                self.on_result(result)
