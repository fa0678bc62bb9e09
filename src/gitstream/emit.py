"""Newline-delimited JSON encoding of file change records."""

import json
from collections.abc import Iterable
from typing import IO, Any

import structlog

from gitstream.log.base import (
    FileChangeRecord,
    RecordEncodingError,
    StreamError,
    TransformStats,
)
from gitstream.utils.datetime import serialize_datetime

__all__ = ["emit", "record_to_dict", "NdjsonWriter"]

logger = structlog.get_logger(__name__)


def record_to_dict(record: FileChangeRecord) -> dict[str, Any]:
    """Map a record to the output field names, in output order.

    Binary file counts stay None and encode as JSON null.
    """
    return {
        "repo": record.repository,
        "sha": record.commit_id,
        "author": record.author,
        "timestamp": serialize_datetime(record.timestamp),
        "path": record.path,
        "category": record.category.value,
        "ext": record.extension,
        "additions": record.additions,
        "deletions": record.deletions,
    }


def emit(record: FileChangeRecord) -> str:
    """Serialize a record as one line of JSON, without the trailing newline.

    Raises:
        RecordEncodingError: If a field holds text that is not valid UTF-8
            (e.g., surrogate escapes from undecodable input bytes).
    """
    line = json.dumps(record_to_dict(record), ensure_ascii=False)
    try:
        line.encode("utf-8")
    except UnicodeEncodeError as e:
        raise RecordEncodingError(
            f"Cannot encode record for {record.commit_id}: {e.reason}"
        ) from e
    return line


class NdjsonWriter:
    """Writes records to a text stream, one JSON object per line.

    Records that fail to encode are dropped and counted in ``stats``; write
    failures on the stream are fatal and raised as :class:`StreamError`.
    Each line goes out in a single write, so lines written before a failure
    stay complete.
    """

    def __init__(self, stream: IO[str], stats: TransformStats | None = None) -> None:
        self.stream = stream
        self.stats = stats if stats is not None else TransformStats()
        self.written = 0

    def write(self, record: FileChangeRecord) -> bool:
        """Write one record. Returns False if it was dropped."""
        try:
            line = emit(record)
        except RecordEncodingError as e:
            self.stats.dropped_records += 1
            logger.warning(
                "record_encoding_failed",
                sha=record.commit_id,
                error=str(e),
            )
            return False

        try:
            self.stream.write(line + "\n")
        except OSError as e:
            raise StreamError(f"Failed to write output: {e}") from e
        self.written += 1
        return True

    def write_all(self, records: Iterable[FileChangeRecord]) -> int:
        """Write every record in order. Returns the number written."""
        for record in records:
            self.write(record)
        self.flush()
        return self.written

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as e:
            raise StreamError(f"Failed to flush output: {e}") from e
