"""Turning a pattern into a chronological series of back-dated commits."""

import logging
from datetime import datetime
from typing import Iterator, Optional, Tuple

from .config import DrawConfig
from .dates import DAY, resolve_cell, to_pattern_column
from .pattern import Pattern

logger = logging.getLogger(__name__)

WEEKDAYS = 7


def walk_window(
    pattern: Pattern,
    start: datetime,
    num_weeks: int,
    config: Optional[DrawConfig] = None,
) -> Iterator[Tuple[datetime, bool]]:
    """Yield (day, lit) for every day of the window, in calendar order.

    Columns are counted from ``config.anchor`` rather than from ``start``, so a
    given day always maps to the same pattern column whatever the window size.
    """
    config = config or DrawConfig()
    offset = to_pattern_column(start, config.anchor)

    d = start - DAY
    for x in range(offset, offset + num_weeks):
        for y in range(WEEKDAYS):
            d += DAY
            yield d, bool(resolve_cell(pattern, x, y))


def commit_message(config: DrawConfig, day: datetime, num: int) -> str:
    return '{}: {:%Y-%m-%d} #{}'.format(config.marker, day, num)


def draw(
    pattern: Pattern,
    start: datetime,
    num_weeks: int,
    repository,
    config: Optional[DrawConfig] = None,
) -> int:
    """Write the pattern into the repository, one commit burst per lit day.

    Stops at the first failed commit and lets the error propagate; commits
    already written stay in the repository. Returns the number of commits made.
    """
    config = config or DrawConfig()
    total = 0
    for day, lit in walk_window(pattern, start, num_weeks, config):
        if not lit:
            logger.info('Skipping commits for %s', day)
            continue
        logger.info('Building commits for %s', day)
        for n in range(1, config.commits_per_day + 1):
            repository.commit(commit_message(config, day, n), day, day)
            total += 1
    return total


def reset_history(repository, config: Optional[DrawConfig] = None) -> None:
    """Squash the entire repository into a single commit."""
    config = config or DrawConfig()
    repository.delete_history_ref()
    repository.recommit(config.reset_message)
    # Trigger a gc, since we just orphaned a lot of objects
    repository.compact()
