"""gitstream transform and log commands."""

from collections.abc import Iterable, Iterator
from dataclasses import asdict
from pathlib import Path
from typing import IO

import click
import structlog

from gitstream.config import settings
from gitstream.emit import NdjsonWriter
from gitstream.log import LogTransformer, StreamError, TransformStats, iter_git_log

logger = structlog.get_logger(__name__)


def _checked_lines(lines: Iterable[str]) -> Iterator[str]:
    """Re-raise input read failures as stream errors."""
    iterator = iter(lines)
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except OSError as e:
            raise StreamError(f"Failed to read input: {e}") from e
        yield line


def run_transform(
    lines: Iterable[str], repository: str, output: IO[str]
) -> TransformStats:
    """Transform git log lines and write NDJSON records to output.

    Raises:
        StreamError: If reading input or writing output fails. Lines already
            written remain valid.
    """
    transformer = LogTransformer(repository)
    writer = NdjsonWriter(output, transformer.stats)
    writer.write_all(transformer.transform(_checked_lines(lines)))
    logger.info("transform_complete", repo=repository, **asdict(transformer.stats))
    return transformer.stats


@click.command()
@click.option(
    "--repo",
    "repo",
    default=None,
    help='Repository label for every record, e.g. "org/name".',
)
@click.option(
    "-i",
    "--input",
    "input_path",
    type=click.Path(dir_okay=False, allow_dash=True),
    default="-",
    help="git log output to read (default: stdin).",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, allow_dash=True, writable=True),
    default="-",
    help="NDJSON destination (default: stdout).",
)
def transform(repo: str | None, input_path: str, output_path: str) -> None:
    """Transform git log output into NDJSON records.

    Expects the output of:

        git log --pretty=format:'"%H","%ae","%ai"' --numstat --no-merges
    """
    repository = repo if repo is not None else settings.repo
    try:
        with click.open_file(
            input_path, "r", encoding=settings.encoding, errors="surrogateescape"
        ) as source, click.open_file(
            output_path, "w", encoding="utf-8"
        ) as sink:
            run_transform(source, repository, sink)
    except StreamError as e:
        raise click.ClickException(str(e)) from e
    except OSError as e:
        raise click.ClickException(f"Cannot open stream: {e}") from e


@click.command()
@click.argument(
    "repo_path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "--repo",
    "repo",
    default=None,
    help="Repository label (default: the repository directory name).",
)
@click.option("--rev", default=None, help="Revision or range to walk (default: HEAD).")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, allow_dash=True, writable=True),
    default="-",
    help="NDJSON destination (default: stdout).",
)
def log(repo_path: Path, repo: str | None, rev: str | None, output_path: str) -> None:
    """Run git log on REPO_PATH and emit NDJSON records."""
    repository = repo or settings.repo or repo_path.resolve().name
    try:
        with click.open_file(output_path, "w", encoding="utf-8") as sink:
            lines = iter_git_log(repo_path, rev=rev, encoding=settings.encoding)
            run_transform(lines, repository, sink)
    except StreamError as e:
        raise click.ClickException(str(e)) from e
    except OSError as e:
        raise click.ClickException(f"Cannot open stream: {e}") from e
