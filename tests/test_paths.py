"""Tests for destination path mapping."""

import pytest

from sharesync.core.exceptions import PathMappingError
from sharesync.domain.sync.paths import (
    destination_dir,
    destination_path,
    is_share_path,
    map_to_host,
    share_remainder,
    split_share_path,
)


class TestLocalDrivePaths:
    def test_file_on_drive(self):
        assert destination_path('C:\\Tools\\app.cfg', 'web01') == '\\\\web01\\C$\\Tools\\app.cfg'

    def test_nested_directory(self):
        assert destination_dir('D:\\Apps\\Billing\\conf', 'web02') == '\\\\web02\\D$\\Apps\\Billing\\conf'

    def test_drive_root_file(self):
        assert destination_path('C:\\boot.ini', 'srv') == '\\\\srv\\C$\\boot.ini'

    def test_drive_root_directory(self):
        assert destination_dir('C:\\', 'srv') == '\\\\srv\\C$'

    def test_drive_letter_case_preserved(self):
        assert destination_path('e:\\data\\x.txt', 'srv') == '\\\\srv\\e$\\data\\x.txt'

    def test_forward_slashes_accepted(self):
        assert destination_path('C:/Tools/app.cfg', 'web01') == '\\\\web01\\C$\\Tools\\app.cfg'


class TestSharePaths:
    def test_host_is_replaced(self):
        assert (
            destination_path('\\\\fs01\\deploy\\app\\app.ini', 'web01')
            == '\\\\web01\\deploy\\app\\app.ini'
        )

    def test_admin_share_source(self):
        assert destination_path('\\\\ws07\\C$\\Tools\\a.cfg', 'web01') == '\\\\web01\\C$\\Tools\\a.cfg'

    def test_segments_kept_verbatim(self):
        src = '\\\\fs01\\Deploy Share\\Mixed Case\\File Name.TXT'
        assert destination_path(src, 'h') == '\\\\h\\Deploy Share\\Mixed Case\\File Name.TXT'

    def test_share_root_directory(self):
        assert destination_dir('\\\\fs01\\deploy\\', 'web01') == '\\\\web01\\deploy'

    def test_file_and_dir_mapping_agree(self):
        path = destination_path('\\\\fs01\\deploy\\sub\\x.cfg', 'web01')
        directory = destination_dir('\\\\fs01\\deploy\\sub', 'web01')
        assert path == directory + '\\x.cfg'

    def test_split_share_path(self):
        assert split_share_path('\\\\fs01\\deploy\\a\\b') == ('fs01', 'deploy\\a\\b')

    def test_incomplete_share_path_rejected(self):
        with pytest.raises(PathMappingError):
            split_share_path('\\\\fs01')

    def test_is_share_path(self):
        assert is_share_path('\\\\fs01\\deploy')
        assert is_share_path('//fs01/deploy')
        assert not is_share_path('C:\\Tools')


class TestUnmappablePaths:
    @pytest.mark.parametrize('path', ['/home/ops/app.cfg', 'relative\\app.cfg', 'C:relative.cfg', ''])
    def test_rejected(self, path):
        with pytest.raises(PathMappingError):
            share_remainder(path)

    def test_empty_host_rejected(self):
        with pytest.raises(PathMappingError):
            map_to_host('C:\\Tools\\a.cfg', '')
