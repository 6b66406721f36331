"""Git access: repository check, staged diff and commit.

The pipeline talks to git only through the ``VersionControl`` interface so it
can run against a fake in tests.
"""

import logging
import subprocess
from abc import ABC, abstractmethod

from ..errors import (
    CommitError,
    DiffEncodingError,
    EmptyDiffError,
    GitExecutionError,
    NotARepositoryError,
    RepositoryError,
)

logger = logging.getLogger(__name__)


def run(args, cwd=None):
    """
    Run a git command and return the CompletedProcess with raw byte streams.

    Raises GitExecutionError if the executable cannot be started. A non-zero
    exit status is not an error here; callers decide what it means.
    """
    logger.debug("Running %s", " ".join(args[:3]))
    try:
        return subprocess.run(args, cwd=cwd, capture_output=True, check=False)
    except OSError as exc:
        raise GitExecutionError(
            "Failed to execute git command. Is git installed?"
        ) from exc


class VersionControl(ABC):
    """What the pipeline needs from a version-control tool."""

    @abstractmethod
    def is_repo(self) -> bool:
        pass

    @abstractmethod
    def staged_diff(self) -> str:
        pass

    @abstractmethod
    def commit(self, message: str) -> None:
        pass


class GitCLI(VersionControl):
    """VersionControl backed by the ``git`` executable."""

    def __init__(self, git="git", cwd=None):
        self.git = git
        self.cwd = cwd

    def _run(self, *args):
        return run([self.git, *args], cwd=self.cwd)

    def is_repo(self):
        result = self._run("rev-parse", "--is-inside-work-tree")
        return result.returncode == 0

    def staged_diff(self):
        if not self.is_repo():
            raise NotARepositoryError("Not inside a git repository")

        result = self._run("diff", "--staged")
        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise RepositoryError(f"Failed to execute git diff command: {stderr}")

        try:
            diff = result.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DiffEncodingError("Failed to parse git diff output as UTF-8") from exc

        if not diff:
            raise EmptyDiffError(
                "No staged changes found. Use 'git add' to stage your changes."
            )
        logger.debug("Staged diff is %d characters", len(diff))
        return diff

    def commit(self, message):
        try:
            result = self._run("commit", "-m", message)
        except GitExecutionError as exc:
            raise CommitError("Failed to execute git commit command") from exc
        if result.returncode != 0:
            # "nothing to commit" is reported on stdout
            output = result.stderr or result.stdout
            raise CommitError(output.decode("utf-8", errors="replace").strip())
        logger.debug("Created commit")
