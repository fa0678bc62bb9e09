"""Git log parsing for gitstream.

Turns the output of
``git log --pretty=format:'"%H","%ae","%ai"' --numstat --no-merges``
into one record per changed file per commit.
"""

from .base import (
    CommitContext,
    FileChange,
    FileChangeRecord,
    GitstreamError,
    RecordEncodingError,
    RepositoryNotFoundError,
    StreamError,
    TransformStats,
)
from .change import parse_change, resolve_rename, unquote_path
from .header import CommitHeader, looks_like_header, parse_header
from .source import GIT_LOG_ARGS, iter_git_log
from .transformer import LogTransformer, transform_lines

__all__ = [
    "LogTransformer",
    "transform_lines",
    "parse_header",
    "parse_change",
    "looks_like_header",
    "resolve_rename",
    "unquote_path",
    "iter_git_log",
    "GIT_LOG_ARGS",
    "CommitHeader",
    "CommitContext",
    "FileChange",
    "FileChangeRecord",
    "TransformStats",
    "GitstreamError",
    "RecordEncodingError",
    "StreamError",
    "RepositoryNotFoundError",
]
