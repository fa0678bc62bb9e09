"""Commit header line parsing.

Header lines are produced by ``--pretty=format:'"%H","%ae","%ai"'``::

    "61708727af02089cef4a72c6a532ddf332111b14","luna@moon.com","2019-08-08 18:03:38 -0400"
"""

import re
from dataclasses import dataclass
from datetime import datetime

from gitstream.utils.datetime import parse_git_timestamp

__all__ = ["CommitHeader", "looks_like_header", "parse_header"]

# Fields are split on the quote-comma-quote boundaries only, so the author
# field may contain bare commas. The id and timestamp never contain quotes.
HEADER_RE = re.compile(
    r"""
    ^"(?P<commit_id>[^"\s]+)"
    ,
    "(?P<author>.*)"
    ,
    "(?P<timestamp>[^"]+)"$
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class CommitHeader:
    """Fields extracted from a header line."""

    commit_id: str
    author: str
    timestamp: datetime


def looks_like_header(line: str) -> bool:
    """Whether a line has the leading quote every header line starts with.

    Change lines start with a count or the binary sentinel, so a quoted line
    that fails :func:`parse_header` is a damaged header rather than noise.
    """
    return line.startswith('"')


def parse_header(line: str) -> CommitHeader | None:
    """Parse a commit header line.

    Args:
        line: One input line without its trailing newline

    Returns:
        The extracted fields, or None if the line is not a well-formed header
        (wrong shape or an unparseable timestamp).
    """
    match = HEADER_RE.match(line.rstrip("\r\n"))
    if match is None:
        return None

    try:
        timestamp = parse_git_timestamp(match.group("timestamp"))
    except ValueError:
        return None

    return CommitHeader(
        commit_id=match.group("commit_id"),
        author=match.group("author"),
        timestamp=timestamp,
    )
