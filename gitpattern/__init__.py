"""Draw bitmap patterns on a git contribution calendar with back-dated commits."""

from .config import DrawConfig
from .dates import day_for_cell, origin_for_window, resolve_cell, to_pattern_column
from .errors import (
    FileReadError,
    GitPatternError,
    MalformedPatternError,
    RepositoryOperationError,
    TooManyRowsError,
)
from .pattern import Pattern, load_image, load_pattern, parse_pattern
from .repository import DryRunRepository, GitRepository
from .scheduler import draw, reset_history, walk_window

__version__ = '0.1.0'

__all__ = [
    'DrawConfig',
    'DryRunRepository',
    'FileReadError',
    'GitPatternError',
    'GitRepository',
    'MalformedPatternError',
    'Pattern',
    'RepositoryOperationError',
    'TooManyRowsError',
    'day_for_cell',
    'draw',
    'load_image',
    'load_pattern',
    'origin_for_window',
    'parse_pattern',
    'reset_history',
    'resolve_cell',
    'to_pattern_column',
    'walk_window',
]
