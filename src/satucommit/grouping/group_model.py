"""
Data models for change classification and commit grouping.

:class:`ChangeSet` is the result of classifying the staged changes,
:class:`GroupedCommitPlan` describes one topic group of changes that
should be committed together, and :class:`CommitGroup` pairs such a
plan's files with its final commit message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set


@dataclass
class ChangeSet:
    """Classification of the staged changes.

    Attributes
    ----------
    added, modified, deleted, renamed : List[str]
        Paths bucketed by status, in the order Git reported them.
    unclassified : List[str]
        Paths whose status code matched none of the buckets above
        (copies, type changes, unmerged entries, ...).
    types : Set[str]
        Commit types inferred from the paths.
    scopes : List[str]
        Scopes inferred from the paths, unique, first-inserted first.
    """

    added: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)
    renamed: List[str] = field(default_factory=list)
    unclassified: List[str] = field(default_factory=list)
    types: Set[str] = field(default_factory=set)
    scopes: List[str] = field(default_factory=list)

    def add_scope(self, scope: str) -> None:
        if scope not in self.scopes:
            self.scopes.append(scope)


@dataclass
class GroupedCommitPlan:
    """A proposed commit for one topic bucket.

    Attributes
    ----------
    type : str
        The commit type (feat, fix, docs, etc.).
    description : str
        Generated description, e.g. ``"add 3 test files"``.
    files : List[str]
        Raw ``status<TAB>path`` lines belonging to the bucket.
    """

    type: str
    description: str
    files: List[str]


@dataclass
class CommitGroup:
    """A grouped commit with its fully formatted message."""

    type: str
    files: List[str]
    message: str
