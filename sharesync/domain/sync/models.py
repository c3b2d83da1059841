"""
Sync domain models
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from ...core.constants import (
    OUTCOME_FAIL,
    OUTCOME_SUCCESS,
    RECORD_SEPARATOR,
    RECORD_TIME_FORMAT,
)


class SyncOutcome(Enum):
    SUCCESS = OUTCOME_SUCCESS
    FAIL = OUTCOME_FAIL


class RunStatus(Enum):
    COMPLETED = "completed"
    DECLINED = "declined"
    FAILED = "failed"


@dataclass(frozen=True)
class SourceFile:
    """Local file selected for distribution"""
    path: str
    directory: str
    name: str
    mtime: datetime


@dataclass(frozen=True)
class CopyError:
    """Structured detail of a failed copy"""
    kind: str
    message: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> "CopyError":
        return cls(kind=type(exc).__name__, message=str(exc))

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}" if self.message else self.kind


@dataclass(frozen=True)
class SyncResult:
    """
    Outcome of one (source file, target host) copy attempt.
    
    ``to_record()`` renders the semicolon-delimited audit line:
    ``<yyyy-MM-dd HH:mm>;<Success|Fail>;<source>;<destination>;<error>;``
    """
    timestamp: datetime
    outcome: SyncOutcome
    source: str
    destination: str
    host: str
    error: Optional[CopyError] = None

    @property
    def ok(self) -> bool:
        return self.outcome is SyncOutcome.SUCCESS

    def to_record(self) -> str:
        fields = [
            self.timestamp.strftime(RECORD_TIME_FORMAT),
            self.outcome.value,
            self.source,
            self.destination,
            str(self.error) if self.error else "",
        ]
        return RECORD_SEPARATOR.join(fields) + RECORD_SEPARATOR


@dataclass(frozen=True)
class Conflict:
    """Destination file newer than its source"""
    source: SourceFile
    host: str
    destination: str
    destination_mtime: datetime


@dataclass
class SyncPlan:
    """Resolved source files (sorted by name) and target scope"""
    files: List[SourceFile]
    targets: List[str]


@dataclass
class FileReport:
    """Everything that happened to one source file"""
    source: SourceFile
    conflicts: List[Conflict] = field(default_factory=list)
    results: List[SyncResult] = field(default_factory=list)
    missing_destinations: List[str] = field(default_factory=list)


@dataclass
class SyncReport:
    """Outcome of a whole run"""
    status: RunStatus
    started: datetime
    plan: SyncPlan
    files: List[FileReport] = field(default_factory=list)

    @property
    def results(self) -> List[SyncResult]:
        return [r for report in self.files for r in report.results]

    @property
    def succeeded(self) -> List[SyncResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[SyncResult]:
        return [r for r in self.results if not r.ok]

    @property
    def missing_destinations(self) -> int:
        return sum(len(report.missing_destinations) for report in self.files)
