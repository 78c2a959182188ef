"""Exceptions raised while loading patterns and writing commits."""


class GitPatternError(Exception):
    """Base class for every error the tool reports."""


class FileReadError(GitPatternError, OSError):
    """A pattern file or image could not be read."""


class MalformedPatternError(GitPatternError, ValueError):
    """A pattern has more rows than there are days in a week."""


TooManyRowsError = MalformedPatternError


class RepositoryOperationError(GitPatternError):
    """A git command exited with an error."""

    def __init__(self, command, output=''):
        self.command = list(command)
        self.output = output
        super().__init__('{} failed'.format(' '.join(self.command)))
