"""Tests for the append-only result log."""

from datetime import datetime

from sharesync.domain.sync.models import CopyError, SyncOutcome, SyncResult
from sharesync.infrastructure.state.result_log import ResultLogWriter

RUN = datetime(2024, 3, 5, 14, 7)


def make_result(host, outcome=SyncOutcome.SUCCESS, error=None):
    return SyncResult(
        timestamp=RUN,
        outcome=outcome,
        source='C:\\a.cfg',
        destination=f'\\\\{host}\\C$\\a.cfg',
        host=host,
        error=error,
    )


class TestResultLogWriter:
    def test_write_creates_parent_dirs(self, tmp_path):
        log = ResultLogWriter(tmp_path / 'logs' / 'sync.log')
        assert log.write([make_result('web01')]) == 1
        assert log.read() == ['2024-03-05 14:07;Success;C:\\a.cfg;\\\\web01\\C$\\a.cfg;;']

    def test_appends_across_runs(self, tmp_path):
        log = ResultLogWriter(tmp_path / 'sync.log')
        log.write([make_result('web01')])
        log.write([make_result('web02', SyncOutcome.FAIL, CopyError('OSError', 'unreachable'))])
        lines = log.read()
        assert len(lines) == 2
        assert lines[1].endswith(';Fail;C:\\a.cfg;\\\\web02\\C$\\a.cfg;OSError: unreachable;')

    def test_empty_write_does_not_create_file(self, tmp_path):
        log = ResultLogWriter(tmp_path / 'sync.log')
        assert log.write([]) == 0
        assert not (tmp_path / 'sync.log').exists()
        assert log.read() == []
