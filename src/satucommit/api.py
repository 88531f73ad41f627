"""
Programmatic API for embedding satucommit.

:class:`SatuCommitAPI` offers the same operations as the command line
(analysis, suggestions, message generation and committing) to callers
such as automated agents::

    from satucommit.api import SatuCommitAPI

    api = SatuCommitAPI()
    if api.is_git_repo():
        message = api.generate(description="implement login", scope="auth")
        if message:
            api.commit(message)

Module-level helpers (:func:`generate`, :func:`commit`, ...) delegate to
a shared default instance bound to the current working directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from satucommit.config.loader import load_config, scope_vocabulary
from satucommit.grouping.change_classifier import classify_changes
from satucommit.grouping.group_model import ChangeSet, CommitGroup
from satucommit.grouping.grouper import generate_grouped_commits, group_changes
from satucommit.message.catalog import DEFAULT_TYPE
from satucommit.message.generator import (
    describe_changes,
    format_commit_message,
    generate_commit_message,
    select_scope,
    suggest_type,
)
from satucommit.vcs.git_client import GitClient, GitError, StagedChange, collect_staged_changes


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class NoCommitMessageError(RuntimeError):
    """Raised when committing without a message and nothing was generated."""

    pass


@dataclass
class Suggestion:
    """Suggested commit type, scope and description for the staged changes."""

    type: str
    scope: str
    description: str


GenerateResult = Union[str, List[CommitGroup], None]


class SatuCommitAPI:
    """Generate and execute semantic commits for one repository."""

    def __init__(self, client: Optional[GitClient] = None, config: Optional[Dict[str, Any]] = None) -> None:
        self.client = client if client is not None else GitClient()
        self.config = config if config is not None else load_config()
        self.scopes = scope_vocabulary(self.config)
        self.last_analysis: Optional[ChangeSet] = None
        self.last_commit_message: Optional[str] = None

    @property
    def default_description(self) -> str:
        return self.config["default_description"]

    def is_git_repo(self) -> bool:
        """Return True if the client's directory is inside a Git repository."""
        return self.client.is_repository()

    def get_staged_changes(self) -> ChangeSet:
        """Classify the currently staged changes and remember the result."""
        self.last_analysis = classify_changes(collect_staged_changes(self.client), self.scopes)
        return self.last_analysis

    def generate(
        self,
        description: Optional[str] = None,
        type: Optional[str] = None,
        scope: Optional[str] = None,
        breaking: bool = False,
        group: bool = False,
    ) -> GenerateResult:
        """Generate a commit message for the staged changes.

        Parameters
        ----------
        description : str, optional
            Commit description; defaults to the configured default.
        type : str, optional
            Commit type. When given, the message is formatted with it
            instead of the inferred type and scope.
        scope : str, optional
            Commit scope, used with ``type`` and for grouped messages.
        breaking : bool
            Mark the change as breaking.
        group : bool
            Split the changes into topic groups.

        Returns
        -------
        str, List[CommitGroup] or None
            ``None`` when nothing is staged, a list of groups when
            ``group`` is set, otherwise the message.
        """
        changes = collect_staged_changes(self.client)
        if not changes:
            return None

        description = description or self.default_description
        analysis = classify_changes(changes, self.scopes)
        self.last_analysis = analysis

        if group:
            plans = generate_grouped_commits(group_changes(changes))
            return [
                CommitGroup(
                    type=plan.type,
                    files=plan.files,
                    message=format_commit_message(plan.type, scope or "", plan.description),
                )
                for plan in plans
            ]

        if type:
            message = format_commit_message(type, scope or "", description, breaking=breaking)
        else:
            message = generate_commit_message(analysis, description, breaking)

        self.last_commit_message = message
        return message

    def commit(self, message: Optional[str] = None) -> bool:
        """Commit the staged changes.

        Falls back on the last generated message.

        Raises
        ------
        NoCommitMessageError
            If no message was given and none was generated before.
        """
        message = message or self.last_commit_message
        if not message:
            raise NoCommitMessageError(
                "No commit message provided. Call generate() first or provide a message."
            )
        return self.client.commit(message)

    def commit_auto(self, **options: Any) -> bool:
        """Generate a message and commit in one step.

        Accepts the keyword arguments of :meth:`generate`. Grouped results
        are committed one after the other, stopping at the first failure.
        """
        result = self.generate(**options)
        if not result:
            logger.info("No staged changes to commit")
            return False
        if isinstance(result, list):
            return self._commit_groups(result)
        return self.commit(result)

    def _commit_groups(self, groups: List[CommitGroup]) -> bool:
        """Commit each group with only its own files staged.

        The staged index is saved as a tree first. Before each commit the
        index is restored from that tree and the files of the groups still
        to come are unstaged. Files of earlier groups already match
        ``HEAD`` by then. On failure the saved index is restored, so the
        remaining groups stay staged exactly as the user staged them.
        """
        group_paths = [
            [path for line in group.files for path in StagedChange.from_line(line).paths]
            for group in groups
        ]
        try:
            staged_tree = self.client.write_index_tree()
        except GitError as exc:
            logger.error("Unable to save the staged changes: %s", exc)
            return False

        for index, group in enumerate(groups):
            later_paths = [path for paths in group_paths[index + 1:] for path in paths]
            try:
                self.client.read_index_tree(staged_tree)
                self.client.unstage(later_paths)
            except GitError as exc:
                logger.error("Unable to stage the %s group: %s", group.type, exc)
                self._restore_index(staged_tree)
                return False
            logger.debug("Committing %d file(s) as %s", len(group.files), group.type)
            if not self.commit(group.message):
                self._restore_index(staged_tree)
                return False
        return True

    def _restore_index(self, tree: str) -> None:
        try:
            self.client.read_index_tree(tree)
        except GitError as exc:
            logger.error("Unable to restore the staged changes: %s", exc)

    def get_suggestions(self) -> Suggestion:
        """Suggest a commit type, scope and description for the staged changes."""
        changes = self.get_staged_changes()
        if not changes.types:
            return Suggestion(type=DEFAULT_TYPE, scope="", description=self.default_description)

        return Suggestion(
            type=suggest_type(changes.types) or DEFAULT_TYPE,
            scope=select_scope(changes),
            description=describe_changes(changes),
        )

    def get_analysis(self) -> ChangeSet:
        """Return the last analysis, analysing the staged changes if needed."""
        if self.last_analysis is None:
            return self.get_staged_changes()
        return self.last_analysis


_default_api: Optional[SatuCommitAPI] = None


def get_default_api() -> SatuCommitAPI:
    """Return the shared instance, creating it on first use."""
    global _default_api
    if _default_api is None:
        _default_api = SatuCommitAPI()
    return _default_api


def is_git_repo() -> bool:
    return get_default_api().is_git_repo()


def get_staged_changes() -> ChangeSet:
    return get_default_api().get_staged_changes()


def get_suggestions() -> Suggestion:
    return get_default_api().get_suggestions()


def get_analysis() -> ChangeSet:
    return get_default_api().get_analysis()


def generate(**options: Any) -> GenerateResult:
    return get_default_api().generate(**options)


def commit(message: Optional[str] = None) -> bool:
    return get_default_api().commit(message)


def commit_auto(**options: Any) -> bool:
    return get_default_api().commit_auto(**options)
