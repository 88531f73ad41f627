"""
Commit message synthesis.

Messages follow the Conventional Commits layout prefixed with a gitmoji:

  <gitmoji> <type>(<scope>)!: <description>

  <body>

  <footer>

The scope, the ``!`` breaking-change marker, the body and the footer are
optional.
"""

from __future__ import annotations

from typing import Iterable, Optional

from satucommit.grouping.group_model import ChangeSet
from satucommit.message.catalog import (
    DEFAULT_DESCRIPTION,
    DEFAULT_TYPE,
    GITMOJIS,
    TYPE_PRIORITY,
)


def suggest_type(types: Iterable[str]) -> Optional[str]:
    """Return the highest priority type among ``types``, if any."""
    present = set(types)
    for commit_type in TYPE_PRIORITY:
        if commit_type in present:
            return commit_type
    return None


def select_type(changes: ChangeSet) -> str:
    """Pick a single commit type for a change set.

    Inferred types win, by :data:`TYPE_PRIORITY`. Without any, the type
    falls back on the status buckets: only deletions give ``remove``,
    additions without modifications ``feat`` and modifications without
    additions ``fix``.
    """
    if changes.types:
        return suggest_type(changes.types) or DEFAULT_TYPE

    if changes.deleted and not changes.added and not changes.modified:
        return "remove"
    if changes.added and not changes.modified:
        return "feat"
    if changes.modified and not changes.added:
        return "fix"
    return DEFAULT_TYPE


def select_scope(changes: ChangeSet) -> str:
    """Return the first inferred scope, or an empty string."""
    return changes.scopes[0] if changes.scopes else ""


def get_marker(commit_type: str) -> str:
    """Return the gitmoji for ``commit_type``; unknown types get the ``feat`` one."""
    return GITMOJIS.get(commit_type, GITMOJIS[DEFAULT_TYPE])


def _format_header(commit_type: str, scope: str, description: str, breaking: bool) -> str:
    header = f"{get_marker(commit_type)} {commit_type}"
    if scope:
        header += f"({scope})"
    if breaking:
        header += "!"
    return f"{header}: {description}"


def generate_commit_message(changes: ChangeSet, description: str, breaking: bool = False) -> str:
    """Generate a one-line commit message from a classified change set."""
    return _format_header(select_type(changes), select_scope(changes), description, breaking)


def format_commit_message(
    commit_type: str,
    scope: str,
    description: str,
    body: str = "",
    footer: str = "",
    breaking: bool = False,
) -> str:
    """Format a commit message from explicit parts.

    Parameters
    ----------
    commit_type : str
        Commit type; types outside the catalog are kept as given.
    scope : str
        Optional scope, omitted when empty.
    description : str
        Short description following the colon.
    body, footer : str
        Appended after a blank line each when non-empty.
    breaking : bool
        Adds ``!`` before the colon.

    Returns
    -------
    str
        The complete commit message.
    """
    message = _format_header(commit_type, scope, description, breaking)
    if body:
        message += f"\n\n{body}"
    if footer:
        message += f"\n\n{footer}"
    return message


def _count(count: int, verb: str) -> str:
    return f"{verb} {count} file{'s' if count > 1 else ''}"


def describe_changes(changes: ChangeSet) -> str:
    """Summarise the status buckets, e.g. ``"add 2 files, update 1 file"``."""
    parts = []
    if changes.added:
        parts.append(_count(len(changes.added), "add"))
    if changes.modified:
        parts.append(_count(len(changes.modified), "update"))
    if changes.deleted:
        parts.append(_count(len(changes.deleted), "remove"))
    return ", ".join(parts) if parts else DEFAULT_DESCRIPTION
