"""Tests for the git log stream transformer."""

from datetime import timedelta

from gitstream.categorize import Category
from gitstream.log import FileChangeRecord, LogTransformer, transform_lines

SHA_1 = "61708727af02089cef4a72c6a532ddf332111b14"
SHA_2 = "0d1f1b2c3e4a5b6c7d8e9f00112233445566778a"

HEADER_1 = f'"{SHA_1}","luna@moon.com","2019-08-08 18:03:38 -0400"'
HEADER_2 = f'"{SHA_2}","sol@sun.com","2019-08-07 09:00:00 +0200"'


class TestLogTransformer:
    """Tests for LogTransformer."""

    def test_end_to_end_example(self) -> None:
        """A header, a blank line and two change lines yield two records."""
        lines = [
            '"abc123","dev@example.com","2024-01-01 10:00:00 +0000"',
            "",
            "3\t1\tsrc/main.rs",
            "-\t-\tassets/logo.png",
        ]
        records = list(transform_lines(lines, "org/name"))

        assert len(records) == 2
        source, asset = records
        assert (source.path, source.extension, source.category) == (
            "src/main.rs",
            "rs",
            Category.SOURCE,
        )
        assert (source.additions, source.deletions) == (3, 1)
        assert (asset.path, asset.extension, asset.category) == (
            "assets/logo.png",
            "png",
            Category.ASSET,
        )
        assert (asset.additions, asset.deletions) == (None, None)
        for record in records:
            assert record.repository == "org/name"
            assert record.commit_id == "abc123"
            assert record.author == "dev@example.com"
            assert record.timestamp.utcoffset() == timedelta(0)

    def test_records_carry_nearest_preceding_header(
        self, sample_log_lines: list[str]
    ) -> None:
        """Each record gets the context of the header before it."""
        records = list(transform_lines(sample_log_lines, "org/name"))

        assert [(r.commit_id, r.path) for r in records] == [
            (SHA_1, "foo/bar/baz.rs"),
            (SHA_1, "assets/logo.png"),
            (SHA_2, "README.md"),
            (SHA_2, "src/new/lib.rs"),
        ]
        assert records[2].author == "sol@sun.com"
        assert records[2].timestamp.utcoffset() == timedelta(hours=2)

    def test_order_preserved(self) -> None:
        """Records come out in change-line order."""
        paths = [f"src/file_{i}.py" for i in range(50)]
        lines = [HEADER_1] + [f"1\t1\t{p}" for p in paths]
        records = list(transform_lines(lines, "r"))
        assert [r.path for r in records] == paths

    def test_idempotent(self, sample_log_lines: list[str]) -> None:
        """Two runs over the same input agree exactly."""
        first = list(transform_lines(sample_log_lines, "org/name"))
        second = list(transform_lines(sample_log_lines, "org/name"))
        assert first == second

    def test_orphaned_change_line(self) -> None:
        """A change line before any header yields nothing and no crash."""
        transformer = LogTransformer("r")
        records = list(transformer.transform(["1\t1\torphan.rs", HEADER_1, "2\t0\ta.rs"]))

        assert [r.path for r in records] == ["a.rs"]
        assert transformer.stats.orphaned_lines == 1

    def test_unrecognized_line_skipped(self) -> None:
        """Noise is skipped and processing continues."""
        transformer = LogTransformer("r")
        lines = [HEADER_1, "1\t1\ta.rs", "warning: something odd", "2\t2\tb.rs"]
        records = list(transformer.transform(lines))

        assert [r.path for r in records] == ["a.rs", "b.rs"]
        assert transformer.stats.unrecognized_lines == 1

    def test_header_without_changes(self) -> None:
        """A commit with no change lines yields nothing and is replaced."""
        lines = [HEADER_1, "", HEADER_2, "", "5\t0\tnew.go"]
        records = list(transform_lines(lines, "r"))

        assert len(records) == 1
        assert records[0].commit_id == SHA_2

    def test_header_at_end_of_stream(self) -> None:
        """A trailing header produces no synthetic record."""
        records = list(transform_lines([HEADER_1, "1\t1\ta.rs", "", HEADER_2], "r"))
        assert [r.commit_id for r in records] == [SHA_1]

    def test_malformed_header_clears_context(self) -> None:
        """Change lines after a damaged header are orphaned, not misattributed."""
        transformer = LogTransformer("r")
        lines = [
            HEADER_1,
            "1\t1\ta.rs",
            f'"{SHA_2}","sol@sun.com","not a date"',
            "2\t2\tb.rs",
        ]
        records = list(transformer.transform(lines))

        assert [r.path for r in records] == ["a.rs"]
        assert transformer.stats.malformed_headers == 1
        assert transformer.stats.orphaned_lines == 1
        assert transformer.context is None

    def test_blank_lines_do_not_change_state(self) -> None:
        """Blank and whitespace-only lines are separators."""
        transformer = LogTransformer("r")
        lines = [HEADER_1, "", "   ", "\n", "1\t1\ta.rs", "", "", "2\t2\tb.rs"]
        records = list(transformer.transform(lines))

        assert [r.commit_id for r in records] == [SHA_1, SHA_1]
        assert transformer.stats.blank_lines == 5

    def test_stats(self, sample_log_lines: list[str]) -> None:
        """Counters reflect every line read."""
        transformer = LogTransformer("r")
        list(transformer.transform(sample_log_lines))
        stats = transformer.stats

        assert stats.lines == len(sample_log_lines)
        assert stats.headers == 2
        assert stats.records == 4
        assert stats.blank_lines == 3
        assert stats.skipped_lines == 0

    def test_feed_returns_record(self) -> None:
        """feed handles one line at a time."""
        transformer = LogTransformer("org/name")
        assert transformer.feed(HEADER_1) is None
        assert transformer.context is not None
        assert transformer.context.commit_id == SHA_1

        record = transformer.feed("4\t2\ttests/test_a.py\n")
        assert isinstance(record, FileChangeRecord)
        assert record.category == Category.TEST
        assert record.extension == "py"

    def test_transform_is_lazy(self) -> None:
        """Records are produced as lines arrive."""
        consumed: list[str] = []

        def lines():
            for line in [HEADER_1, "1\t1\ta.rs", "2\t2\tb.rs"]:
                consumed.append(line)
                yield line

        records = transform_lines(lines(), "r")
        first = next(records)

        assert first.path == "a.rs"
        assert len(consumed) == 2

    def test_extensionless_path(self) -> None:
        """Files without an extension get an empty one."""
        records = list(transform_lines([HEADER_1, "1\t0\tMakefile"], "r"))
        assert records[0].extension == ""
        assert records[0].category == Category.BUILD
