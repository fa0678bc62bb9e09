"""Stateful transformation of git log lines into file change records."""

from collections.abc import Iterable, Iterator

import structlog

from gitstream.categorize import categorize, path_extension

from .base import CommitContext, FileChange, FileChangeRecord, TransformStats
from .change import parse_change
from .header import looks_like_header, parse_header

logger = structlog.get_logger(__name__)

# Keeps diagnostics readable when a huge line is skipped
MAX_LOGGED_LINE_LENGTH = 200


def _excerpt(line: str) -> str:
    if len(line) <= MAX_LOGGED_LINE_LENGTH:
        return line
    return line[:MAX_LOGGED_LINE_LENGTH] + "..."


class LogTransformer:
    """Turns git log lines into one record per changed file.

    The only state is the active :class:`CommitContext`. It is None until the
    first header line and is replaced by every later header, so each record
    carries the nearest preceding header. Records are produced as soon as
    their change line is read; nothing is buffered.

    A header followed directly by another header yields nothing: a commit
    without change lines owes no records. Whatever context is active when
    input ends is dropped silently.
    """

    def __init__(self, repository: str) -> None:
        self.repository = repository
        self.context: CommitContext | None = None
        self.stats = TransformStats()

    def feed(self, line: str) -> FileChangeRecord | None:
        """Consume one input line.

        Args:
            line: The line, with or without its trailing newline

        Returns:
            The record for a change line under an active commit, else None.
        """
        self.stats.lines += 1
        line = line.rstrip("\r\n")

        if not line.strip():
            self.stats.blank_lines += 1
            return None

        header = parse_header(line)
        if header is not None:
            self.stats.headers += 1
            self.context = CommitContext(
                repository=self.repository,
                commit_id=header.commit_id,
                author=header.author,
                timestamp=header.timestamp,
            )
            return None

        change = parse_change(line)
        if change is not None:
            if self.context is None:
                self.stats.orphaned_lines += 1
                logger.warning(
                    "orphaned_change_line",
                    line_number=self.stats.lines,
                    line=_excerpt(line),
                )
                return None
            self.stats.records += 1
            return self._build_record(self.context, change)

        if looks_like_header(line):
            # Later change lines belong to this broken commit, not the last one
            self.stats.malformed_headers += 1
            logger.warning(
                "malformed_header",
                line_number=self.stats.lines,
                line=_excerpt(line),
                previous_commit=self.context.commit_id if self.context else None,
            )
            self.context = None
            return None

        self.stats.unrecognized_lines += 1
        logger.warning(
            "unrecognized_line",
            line_number=self.stats.lines,
            line=_excerpt(line),
        )
        return None

    def transform(self, lines: Iterable[str]) -> Iterator[FileChangeRecord]:
        """Lazily transform a sequence of lines, preserving order."""
        for line in lines:
            record = self.feed(line)
            if record is not None:
                yield record

    @staticmethod
    def _build_record(
        context: CommitContext, change: FileChange
    ) -> FileChangeRecord:
        extension = path_extension(change.path)
        return FileChangeRecord(
            repository=context.repository,
            commit_id=context.commit_id,
            author=context.author,
            timestamp=context.timestamp,
            path=change.path,
            extension=extension,
            category=categorize(change.path, extension),
            additions=change.additions,
            deletions=change.deletions,
        )


def transform_lines(
    lines: Iterable[str], repository: str
) -> Iterator[FileChangeRecord]:
    """Transform git log lines into records using a fresh transformer."""
    return LogTransformer(repository).transform(lines)
