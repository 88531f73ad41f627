"""
Git client implementation for satucommit.

This module wraps the few Git operations the commit helper needs:
checking that the working directory belongs to a repository, listing
the staged changes and creating a commit. All subprocess calls go
through :meth:`GitClient._run` so that unit tests can mock them easily.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
# Attach a null handler so library use without logging configuration stays
# silent. Records still propagate once the CLI configures the root logger.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class StagedChange:
    """A single line of ``git diff --cached --name-status`` output."""

    status: str  # e.g. 'A', 'M', 'D', 'R100', '??'
    path: str

    @classmethod
    def from_line(cls, line: str) -> "StagedChange":
        """Parse a ``status<TAB>path`` line.

        Every field after the status is joined back with a tab, so renames
        keep both the old and the new path and paths containing tab
        characters survive the split.
        """
        status, *path_parts = line.split("\t")
        return cls(status=status.strip(), path="\t".join(path_parts))

    @property
    def line(self) -> str:
        """The raw ``status<TAB>path`` line."""
        return f"{self.status}\t{self.path}"

    @property
    def paths(self) -> List[str]:
        """Every path the change touches (old and new path for renames)."""
        return self.path.split("\t")


class GitError(Exception):
    """Raised when a Git command fails or Git cannot be executed."""

    pass


def parse_name_status(output: str) -> List[StagedChange]:
    """Parse ``git diff --name-status`` output into staged changes."""
    return [StagedChange.from_line(line) for line in output.splitlines() if line.strip()]


class GitClient:
    """Client for interacting with a Git repository."""

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = repo_root if repo_root is not None else Path.cwd()

    # ------------------------------------------------------------------
    # Basic Git commands
    # ------------------------------------------------------------------
    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If Git cannot be started, or if the command exits with a
            non-zero status when ``check`` is True.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.error("Unable to execute Git: %s", e)
            raise GitError(f"Unable to execute git: {e}") from e

        if check and result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(result.stderr.strip() or result.stdout.strip())
        return result

    def is_repository(self) -> bool:
        """Return True if ``repo_root`` is inside a Git repository.

        Never raises: a missing ``git`` executable counts as "not a
        repository".
        """
        try:
            result = self._run(["rev-parse", "--git-dir"], check=False)
        except GitError:
            return False
        return result.returncode == 0

    # ------------------------------------------------------------------
    # Staged changes
    # ------------------------------------------------------------------
    def get_staged_changes(self) -> List[StagedChange]:
        """Get the list of changes staged for the next commit.

        Returns
        -------
        List[StagedChange]
            One entry per line of ``git diff --cached --name-status``,
            in the order Git reports them.

        Raises
        ------
        GitError
            If the diff command fails.
        """
        result = self._run(["diff", "--cached", "--name-status"], check=True)
        return parse_name_status(result.stdout)

    # ------------------------------------------------------------------
    # Index snapshots
    # ------------------------------------------------------------------
    def write_index_tree(self) -> str:
        """Store the current index as a tree object and return its id."""
        return self._run(["write-tree"], check=True).stdout.strip()

    def read_index_tree(self, tree: str) -> None:
        """Replace the index with ``tree``. The working tree is left alone."""
        self._run(["read-tree", tree], check=True)

    def unstage(self, paths: List[str]) -> None:
        """Reset the index entries of ``paths`` to ``HEAD``.

        Paths that do not exist in ``HEAD`` are dropped from the index, so
        this also works for added files and on a branch without commits.
        """
        if not paths:
            return
        self._run(["reset", "-q", "--"] + list(paths), check=True)

    # ------------------------------------------------------------------
    # Committing
    # ------------------------------------------------------------------
    def commit(self, message: str) -> bool:
        """Create a commit with the given message.

        The message is handed to Git as a single argument, never through a
        shell, so quotes and other shell syntax in it are kept verbatim.
        Returns False (after logging the error) if the commit fails.
        """
        try:
            self._run(["commit", "-m", message], check=True)
        except GitError as exc:
            logger.error("Error creating commit: %s", exc)
            return False
        return True


def collect_staged_changes(client: GitClient) -> List[StagedChange]:
    """Return the staged changes of ``client``, or an empty list on failure.

    Listing failures are logged and reported as "nothing staged".
    """
    try:
        return client.get_staged_changes()
    except GitError as exc:
        logger.error("Error getting git diff: %s", exc)
        return []
