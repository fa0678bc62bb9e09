"""Pytest configuration and fixtures."""

import pytest

SHA_1 = "61708727af02089cef4a72c6a532ddf332111b14"
SHA_2 = "0d1f1b2c3e4a5b6c7d8e9f00112233445566778a"


@pytest.fixture
def sample_log_lines() -> list[str]:
    """git log output for two commits, as read from a stream."""
    return [
        f'"{SHA_1}","luna@moon.com","2019-08-08 18:03:38 -0400"\n',
        "\n",
        "6\t3\tfoo/bar/baz.rs\n",
        "-\t-\tassets/logo.png\n",
        "\n",
        f'"{SHA_2}","sol@sun.com","2019-08-07 09:00:00 +0200"\n',
        "\n",
        "10\t0\tREADME.md\n",
        "2\t2\tsrc/{old => new}/lib.rs\n",
    ]


@pytest.fixture
def sample_log_text(sample_log_lines: list[str]) -> str:
    """Sample git log output as a single string."""
    return "".join(sample_log_lines)
