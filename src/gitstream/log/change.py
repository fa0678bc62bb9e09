"""Numstat change line parsing.

``git log --numstat`` emits one line per changed file::

    6\t3\tfoo/bar/baz.rs
    -\t-\tassets/logo.png
    1\t1\tsrc/{old => new}/mod.rs
"""

import re

from .base import FileChange

__all__ = ["BINARY_SENTINEL", "parse_change", "resolve_rename", "unquote_path"]

BINARY_SENTINEL = "-"

_COUNT_RE = re.compile(r"[0-9]+")
_BRACE_RENAME_RE = re.compile(r"\{([^{}]*) => ([^{}]*)\}")
_RENAME_ARROW = " => "

# C-style escapes git uses when quoting unusual paths
_SIMPLE_ESCAPES = {
    "a": b"\a",
    "b": b"\b",
    "t": b"\t",
    "n": b"\n",
    "v": b"\v",
    "f": b"\f",
    "r": b"\r",
    '"': b'"',
    "\\": b"\\",
}


def _parse_count(field: str) -> tuple[bool, int | None]:
    if field == BINARY_SENTINEL:
        return True, None
    if _COUNT_RE.fullmatch(field):
        return True, int(field)
    return False, None


def unquote_path(path: str) -> str:
    """Undo git's C-style path quoting.

    Paths containing control characters, quotes, backslashes or non-ASCII
    bytes (with the default ``core.quotePath``) are wrapped in double quotes
    with octal byte escapes. Unquoted paths are returned unchanged. Bytes that
    are not valid UTF-8 are kept as surrogate escapes.

    Examples:
        >>> unquote_path('"caf\\\\303\\\\251.txt"')
        'café.txt'
        >>> unquote_path("plain.txt")
        'plain.txt'
    """
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path

    inner = path[1:-1]
    out = bytearray()
    i = 0
    while i < len(inner):
        char = inner[i]
        if char != "\\" or i + 1 == len(inner):
            out.extend(char.encode("utf-8", "surrogateescape"))
            i += 1
            continue

        escape = inner[i + 1]
        octal = inner[i + 1:i + 4]
        if len(octal) == 3 and all(c in "01234567" for c in octal):
            out.append(int(octal, 8) & 0xFF)
            i += 4
        elif escape in _SIMPLE_ESCAPES:
            out.extend(_SIMPLE_ESCAPES[escape])
            i += 2
        else:
            out.extend(inner[i:i + 2].encode("utf-8", "surrogateescape"))
            i += 2

    return out.decode("utf-8", "surrogateescape")


def resolve_rename(path: str) -> str:
    """Resolve git's rename notation to the post-rename path.

    Handles the brace form ``src/{old => new}/file.py`` (either side may be
    empty) and the bare form ``old.txt => new.txt``. Paths without rename
    notation are returned unchanged.
    """
    if _RENAME_ARROW not in path:
        return path

    if _BRACE_RENAME_RE.search(path):
        resolved = _BRACE_RENAME_RE.sub(lambda m: m.group(2), path)
        # An empty side leaves a doubled or dangling separator behind
        while "//" in resolved:
            resolved = resolved.replace("//", "/")
        return resolved.strip("/")

    return path.split(_RENAME_ARROW, 1)[1]


def parse_change(line: str) -> FileChange | None:
    """Parse a numstat change line.

    Args:
        line: One input line without its trailing newline

    Returns:
        The parsed counts and final path, or None if the line is not a
        change line (too few tab-separated fields, non-numeric counts that
        are not the binary sentinel, or an empty path).
    """
    parts = line.rstrip("\r\n").split("\t", 2)
    if len(parts) != 3:
        return None

    additions_field, deletions_field, raw_path = parts
    ok_additions, additions = _parse_count(additions_field)
    ok_deletions, deletions = _parse_count(deletions_field)
    if not (ok_additions and ok_deletions):
        return None

    path = unquote_path(resolve_rename(raw_path))
    if not path:
        return None

    return FileChange(additions=additions, deletions=deletions, path=path)
