"""Shared test fixtures for gitpattern tests."""

import sys
from datetime import datetime, timezone
from pathlib import Path

# Ensure gitpattern package is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest
from gitpattern.config import DrawConfig
from gitpattern.errors import RepositoryOperationError
from gitpattern.repository import DryRunRepository


class FailingRepository(DryRunRepository):
    """Records calls like a dry run, but fails the named operation."""

    def __init__(self, fail_on, after=0):
        super().__init__()
        self.fail_on = fail_on
        self.after = after

    def _maybe_fail(self, name):
        if name != self.fail_on:
            return
        if self.after <= 0:
            raise RepositoryOperationError(['git', name], 'fatal: {} failed\n'.format(name))
        self.after -= 1

    def commit(self, message, author_date, committer_date):
        self._maybe_fail('commit')
        super().commit(message, author_date, committer_date)

    def delete_history_ref(self):
        self._maybe_fail('delete_history_ref')
        super().delete_history_ref()

    def recommit(self, message):
        self._maybe_fail('recommit')
        super().recommit(message)

    def compact(self):
        self._maybe_fail('compact')
        super().compact()


@pytest.fixture
def write_pattern(tmp_path):
    """Write pattern text to a file and return its path."""
    def _write(text, name='pattern.txt'):
        path = tmp_path / name
        path.write_text(text, encoding='utf-8')
        return path
    return _write


@pytest.fixture
def repo():
    return DryRunRepository()


@pytest.fixture
def small_config():
    """Three commits per day so bursts stay short."""
    return DrawConfig(commits_per_day=3)


@pytest.fixture
def anchor():
    return DrawConfig().anchor


@pytest.fixture
def sunday():
    """A window start that is an even number of weeks after the anchor."""
    return datetime(2024, 1, 7, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def failing_repo():
    """Factory for repositories that fail a chosen operation."""
    return FailingRepository
