"""Run configuration for drawing a pattern."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

# Week-column 0 of every pattern. A Sunday, so window starts land on whole weeks.
DEFAULT_ANCHOR = datetime(2015, 4, 26, 12, 0, 0, tzinfo=timezone.utc)
DAILY_COMMITS = 100
FAKE_PREFIX = 'FAKE_COMMIT'
REAL_COMMIT = 'Add script and image file'
# Noon UTC avoids TZ edge cases
COMMIT_HOUR = 12


@dataclass
class DrawConfig:
    """Values shared by the calendar mapping and the commit scheduler."""

    anchor: datetime = field(default=DEFAULT_ANCHOR)
    commits_per_day: int = DAILY_COMMITS
    marker: str = FAKE_PREFIX
    hour: int = COMMIT_HOUR
    reset_message: str = REAL_COMMIT

    def validate(self) -> None:
        """Validate all configuration parameters."""
        errors = []

        if self.anchor.tzinfo is None:
            errors.append('anchor must be timezone-aware')

        if self.commits_per_day < 1:
            errors.append(
                'commits_per_day must be >= 1, got {}'.format(self.commits_per_day)
            )

        if not 0 <= self.hour <= 23:
            errors.append('hour must be between 0 and 23, got {}'.format(self.hour))

        if not self.marker:
            errors.append('marker must not be empty')

        if not self.reset_message:
            errors.append('reset_message must not be empty')

        if errors:
            raise ValueError(
                'Configuration validation failed:\n  - ' + '\n  - '.join(errors)
            )
