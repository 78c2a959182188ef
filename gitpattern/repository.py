"""Git operations used to write the pattern into a repository."""

import logging
import os
import subprocess
from datetime import datetime, timedelta

from .errors import RepositoryOperationError

logger = logging.getLogger(__name__)


def format_date(date: datetime) -> str:
    """RFC 3339 timestamp as accepted by GIT_AUTHOR_DATE."""
    if date.utcoffset() == timedelta(0):
        return date.strftime('%Y-%m-%dT%H:%M:%SZ')
    return date.isoformat(timespec='seconds')


class GitRepository:
    """Runs git commands inside a working tree."""

    def __init__(self, path='.'):
        self.path = path

    def commit(self, message: str, author_date: datetime, committer_date: datetime) -> None:
        """Create an empty commit with spoofed author and committer dates."""
        env = os.environ.copy()
        env['GIT_AUTHOR_DATE'] = format_date(author_date)
        env['GIT_COMMITTER_DATE'] = format_date(committer_date)
        self._run(['git', 'commit', '--allow-empty', '-m', message], env=env)

    def delete_history_ref(self) -> None:
        # Drop all commits, but leave directory contents
        self._run(['git', 'update-ref', '-d', 'HEAD'])

    def recommit(self, message: str) -> None:
        self._run(['git', 'commit', '-am', message])

    def compact(self) -> None:
        self._run(['git', 'gc', '--aggressive', '--force', '--prune=now'])

    def _run(self, cmd, env=None) -> str:
        logger.debug('Running %s', ' '.join(cmd))
        try:
            res = subprocess.run(
                cmd,
                cwd=self.path,
                env=env,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as e:
            raise RepositoryOperationError(cmd, str(e)) from e
        if res.returncode != 0:
            raise RepositoryOperationError(cmd, res.stdout)
        return res.stdout


class DryRunRepository:
    """Records the operations a run would perform without touching git."""

    def __init__(self):
        self.calls = []

    def commit(self, message: str, author_date: datetime, committer_date: datetime) -> None:
        logger.debug('[DRY-RUN] commit %r at %s', message, format_date(author_date))
        self.calls.append(('commit', message, author_date, committer_date))

    def delete_history_ref(self) -> None:
        logger.info('[DRY-RUN] delete HEAD')
        self.calls.append(('delete_history_ref',))

    def recommit(self, message: str) -> None:
        logger.info('[DRY-RUN] recommit %r', message)
        self.calls.append(('recommit', message))

    def compact(self) -> None:
        logger.info('[DRY-RUN] gc')
        self.calls.append(('compact',))

    @property
    def commits(self):
        return [call for call in self.calls if call[0] == 'commit']
