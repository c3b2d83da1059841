"""Tests for sync result records and reports."""

from datetime import datetime

from sharesync.domain.sync.models import (
    CopyError,
    FileReport,
    RunStatus,
    SourceFile,
    SyncOutcome,
    SyncPlan,
    SyncReport,
    SyncResult,
)

RUN = datetime(2024, 3, 5, 14, 7, 31)


def make_result(outcome=SyncOutcome.SUCCESS, error=None, host='web01'):
    return SyncResult(
        timestamp=RUN,
        outcome=outcome,
        source='C:\\Tools\\a.cfg',
        destination=f'\\\\{host}\\C$\\Tools\\a.cfg',
        host=host,
        error=error,
    )


class TestSyncResultRecord:
    def test_success_record(self):
        assert make_result().to_record() == (
            '2024-03-05 14:07;Success;C:\\Tools\\a.cfg;\\\\web01\\C$\\Tools\\a.cfg;;'
        )

    def test_fail_record_includes_error(self):
        error = CopyError(kind='PermissionError', message='Access is denied')
        record = make_result(SyncOutcome.FAIL, error).to_record()
        assert record.split(';') == [
            '2024-03-05 14:07',
            'Fail',
            'C:\\Tools\\a.cfg',
            '\\\\web01\\C$\\Tools\\a.cfg',
            'PermissionError: Access is denied',
            '',
        ]

    def test_copy_error_from_exception(self):
        error = CopyError.from_exception(FileNotFoundError('gone'))
        assert error.kind == 'FileNotFoundError'
        assert error.message == 'gone'

    def test_copy_error_without_message(self):
        assert str(CopyError(kind='TimeoutError', message='')) == 'TimeoutError'

    def test_ok(self):
        assert make_result().ok
        assert not make_result(SyncOutcome.FAIL).ok


class TestSyncReport:
    def test_aggregates_results(self):
        source = SourceFile(path='C:\\Tools\\a.cfg', directory='C:\\Tools', name='a.cfg', mtime=RUN)
        report = SyncReport(
            status=RunStatus.COMPLETED,
            started=RUN,
            plan=SyncPlan(files=[source], targets=['web01', 'web02', 'web03']),
            files=[
                FileReport(
                    source=source,
                    results=[make_result(), make_result(SyncOutcome.FAIL, host='web02')],
                    missing_destinations=['web03'],
                ),
            ],
        )
        assert len(report.results) == 2
        assert [r.host for r in report.succeeded] == ['web01']
        assert [r.host for r in report.failed] == ['web02']
        assert report.missing_destinations == 1
