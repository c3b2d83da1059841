"""Shared fixtures: an in-memory share filesystem and a scripted prompt."""

import fnmatch
import ntpath
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from sharesync.core.interfaces import PromptProvider, ShareFileSystem


class FakeShareFileSystem(ShareFileSystem):
    """Windows-style paths kept in dictionaries."""

    def __init__(self):
        self.files = {}
        self.dirs = set()
        self.blocked_dirs = set()
        self.failing_copies = {}
        self.copies = []

    def _add_dirs(self, path):
        path = path.rstrip('\\')
        while path and path not in self.dirs:
            self.dirs.add(path)
            parent = ntpath.dirname(path).rstrip('\\')
            if parent == path:
                break
            path = parent

    def add_file(self, path, mtime):
        self.files[path] = mtime
        self._add_dirs(ntpath.dirname(path))

    def glob(self, pattern):
        return sorted(p for p in self.files if fnmatch.fnmatchcase(p, pattern))

    def is_file(self, path):
        return path in self.files

    def is_dir(self, path):
        return path.rstrip('\\') in self.dirs

    def mtime(self, path):
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path)

    def makedirs(self, path):
        if any(path.startswith(blocked) for blocked in self.blocked_dirs):
            raise PermissionError(13, 'Access is denied', path)
        self._add_dirs(path)

    def copy(self, source, destination):
        if destination in self.failing_copies:
            raise self.failing_copies[destination]
        if destination in self.dirs:
            raise IsADirectoryError(21, 'Is a directory', destination)
        if not self.is_dir(ntpath.dirname(destination)):
            raise FileNotFoundError(2, 'The system cannot find the path specified', destination)
        self.files[destination] = self.files[source]
        self.copies.append((source, destination))


@pytest.fixture
def fs():
    return FakeShareFileSystem()


@pytest.fixture
def prompt():
    p = MagicMock(spec=PromptProvider)
    p.confirm.return_value = True
    return p


@pytest.fixture
def clock():
    return lambda: datetime(2024, 3, 5, 14, 7, 31)
