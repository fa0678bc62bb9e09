"""Base classes, dataclasses, and types for git log transformation."""

from dataclasses import dataclass
from datetime import datetime

from gitstream.categorize import Category


class GitstreamError(Exception):
    """Base exception for gitstream errors."""

    pass


class RecordEncodingError(GitstreamError):
    """A record cannot be serialized (e.g., undecodable bytes in a field)."""

    pass


class StreamError(GitstreamError):
    """The input or output stream failed; fatal to the run."""

    pass


class RepositoryNotFoundError(StreamError):
    """Repository path is not a valid git repository."""

    pass


@dataclass(frozen=True)
class CommitContext:
    """Metadata of the commit whose change lines are being read."""

    repository: str
    commit_id: str
    author: str
    timestamp: datetime  # Keeps the offset reported by git


@dataclass(frozen=True)
class FileChange:
    """One parsed change line.

    ``None`` counts mark binary files, for which git reports no line counts.
    """

    additions: int | None
    deletions: int | None
    path: str


@dataclass(frozen=True)
class FileChangeRecord:
    """One emitted unit: a single changed file within a single commit."""

    repository: str
    commit_id: str
    author: str
    timestamp: datetime
    path: str
    extension: str
    category: Category
    additions: int | None
    deletions: int | None


@dataclass
class TransformStats:
    """Counters for a single transformation run."""

    lines: int = 0
    blank_lines: int = 0
    headers: int = 0
    records: int = 0
    orphaned_lines: int = 0
    unrecognized_lines: int = 0
    malformed_headers: int = 0
    dropped_records: int = 0

    @property
    def skipped_lines(self) -> int:
        """Lines discarded as structural mismatches."""
        return self.orphaned_lines + self.unrecognized_lines + self.malformed_headers
