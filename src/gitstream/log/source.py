"""GitPython-based source of git log lines."""

from collections.abc import Iterator
from pathlib import Path

import git
import structlog

from .base import RepositoryNotFoundError, StreamError

logger = structlog.get_logger(__name__)

# The exact query whose output the parsers understand
GIT_LOG_ARGS = (
    '--pretty=format:"%H","%ae","%ai"',
    "--numstat",
    "--no-merges",
)


def iter_git_log(
    repo_path: str | Path,
    rev: str | None = None,
    encoding: str = "utf-8",
) -> Iterator[str]:
    """Run the git log query and yield its output line by line.

    Output is streamed from the git process, so memory use does not grow
    with history length. Undecodable bytes are kept as surrogate escapes.

    Args:
        repo_path: Path to a git working tree or bare repository
        rev: Optional revision or range (defaults to HEAD)
        encoding: Encoding of git's output

    Raises:
        RepositoryNotFoundError: If repo_path is not a git repository
        StreamError: If git fails (e.g., unknown revision, no commits)
    """
    try:
        repo = git.Repo(repo_path)
    except (git.InvalidGitRepositoryError, git.NoSuchPathError) as e:
        raise RepositoryNotFoundError(
            f"Not a valid git repository: {repo_path}"
        ) from e

    args = list(GIT_LOG_ARGS)
    if rev:
        args.append(rev)

    logger.debug("git_log_started", repo_path=str(repo_path), rev=rev)
    try:
        process = repo.git.log(*args, as_process=True)
        for raw in process.stdout:  # type: ignore[union-attr]
            yield raw.decode(encoding, "surrogateescape")
        process.wait()
    except git.GitCommandError as e:
        raise StreamError(f"git log failed: {e}") from e
    finally:
        repo.close()
