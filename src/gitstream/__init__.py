"""gitstream - git history as analytics-ready NDJSON.

Transforms ``git log --numstat`` output into one JSON record per changed
file per commit.
"""

__version__ = "0.1.0"

from gitstream.categorize import Category, categorize  # noqa: E402
from gitstream.emit import NdjsonWriter, emit  # noqa: E402
from gitstream.log import FileChangeRecord, LogTransformer, transform_lines  # noqa: E402

__all__ = [
    "__version__",
    "Category",
    "categorize",
    "LogTransformer",
    "transform_lines",
    "FileChangeRecord",
    "NdjsonWriter",
    "emit",
]
