"""Command-line entry point."""

import argparse
import logging
import math
import sys
from datetime import datetime, timezone

from .config import DrawConfig
from .dates import day_for_cell, origin_for_window
from .errors import GitPatternError, RepositoryOperationError
from .pattern import load_image, load_pattern
from .repository import DryRunRepository, GitRepository
from .scheduler import draw, reset_history

logger = logging.getLogger('gitpattern')

LOG_FORMAT = '%(asctime)s %(message)s'


def non_negative_int(value):
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError('must be >= 0, got {}'.format(n))
    return n


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gitpattern',
        description='Draw a pattern on your contribution calendar with back-dated commits.',
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('-p', '--pattern', type=str, help='the pattern file to use (7 rows max, space = no commits)')
    source.add_argument('-i', '--image', type=str, help='draw a bitmap image (7 pixels tall max) instead of a pattern file')
    parser.add_argument('-w', '--weeks', type=non_negative_int, help='the number of weeks to generate, default 1', default=1)
    parser.add_argument('--reset', action='store_true', help='squash the repository history into a single commit first')
    parser.add_argument('-r', '--repo', type=str, help='path of the git repository, defaults to the current directory', default='.')
    parser.add_argument('--dry-run', action='store_true', help='log the commits instead of running git')
    parser.add_argument('--no-preview', action='store_true', help='don\'t show a terminal preview')
    parser.add_argument('-v', '--verbose', action='store_true', help='log every git command')
    parser.add_argument('-q', '--quiet', action='store_true', help='only log warnings and errors')
    return parser


def _configure_logging(args) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _print_preview(pattern, start, num_weeks) -> None:
    width = max(pattern.width, 15)
    b_side = math.ceil((width - 15) / 2)
    print(b_side * '=', 'Pattern Preview', b_side * '=')
    print(pattern.preview())
    print(width * '=')
    if num_weeks:
        end = day_for_cell(start, num_weeks - 1, 6)
        print('Window: {:%Y-%m-%d} to {:%Y-%m-%d} ({} weeks)'.format(start, end, num_weeks))


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args)

    config = DrawConfig()
    config.validate()

    try:
        logger.info('Loading pattern file...')
        if args.image:
            pattern = load_image(args.image)
        else:
            pattern = load_pattern(args.pattern)
    except GitPatternError as e:
        logger.error("Couldn't load pattern: %s", e)
        return 1

    start = origin_for_window(datetime.now(timezone.utc), args.weeks, config.hour)
    if not args.no_preview:
        _print_preview(pattern, start, args.weeks)

    repository = DryRunRepository() if args.dry_run else GitRepository(args.repo)

    if args.reset:
        logger.info('Squashing prior history into a single commit...')
        try:
            reset_history(repository, config)
        except RepositoryOperationError as e:
            sys.stderr.write(e.output)
            logger.error("Couldn't flatten history: %s", e)
            return 1

    try:
        total = draw(pattern, start, args.weeks, repository, config)
    except RepositoryOperationError as e:
        sys.stderr.write(e.output)
        logger.error("Couldn't draw pattern: %s", e)
        return 1

    if args.dry_run:
        print('[DRY-RUN] Total would commit: {}'.format(total))
    else:
        print('Generated {} commits'.format(total))
    return 0
