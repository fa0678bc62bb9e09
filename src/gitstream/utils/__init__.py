"""gitstream utility modules.

Provides centralized utilities for:
- datetime: git timestamp parsing and ISO 8601 serialization
"""

from gitstream.utils.datetime import parse_git_timestamp, serialize_datetime

__all__ = ["parse_git_timestamp", "serialize_datetime"]
