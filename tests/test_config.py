"""Tests for DrawConfig."""

from datetime import datetime, timezone

import pytest

from gitpattern.config import DrawConfig


class TestDrawConfig:
    def test_defaults(self):
        config = DrawConfig()
        config.validate()
        assert config.anchor == datetime(2015, 4, 26, 12, tzinfo=timezone.utc)
        assert config.anchor.weekday() == 6
        assert config.commits_per_day == 100
        assert config.marker == 'FAKE_COMMIT'
        assert config.hour == 12

    def test_collects_all_errors(self):
        config = DrawConfig(commits_per_day=0, hour=24, marker='')
        with pytest.raises(ValueError) as excinfo:
            config.validate()
        message = str(excinfo.value)
        assert 'commits_per_day' in message
        assert 'hour' in message
        assert 'marker' in message
        assert 'hour must be between 0 and 23, got 24' in message
        assert 'commits_per_day must be >= 1, got 0' in message

    def test_naive_anchor_rejected(self):
        with pytest.raises(ValueError, match='timezone-aware'):
            DrawConfig(anchor=datetime(2015, 4, 26, 12)).validate()
