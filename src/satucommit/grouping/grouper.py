"""
Grouping of staged changes into topic commits.

:func:`group_changes` sorts every staged change into one topic bucket
using the same ordered rules as the type classifier, and
:func:`generate_grouped_commits` turns every non-empty bucket into a
:class:`GroupedCommitPlan` with a pluralised description.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, NamedTuple, Tuple

from satucommit.grouping.change_classifier import infer_type
from satucommit.grouping.group_model import GroupedCommitPlan
from satucommit.vcs.git_client import StagedChange


class BucketSpec(NamedTuple):
    """How a topic bucket is turned into a commit plan."""

    bucket: str
    type: str
    verb: str
    singular: str
    plural: str


# Plans are emitted in this order. Nothing is routed to ``chore``; the
# bucket is listed so that the enumeration stays complete.
BUCKETS: Tuple[BucketSpec, ...] = (
    BucketSpec("features", "feat", "add", "new file", "new files"),
    BucketSpec("fixes", "fix", "fix", "file", "files"),
    BucketSpec("docs", "docs", "update", "documentation file", "documentation files"),
    BucketSpec("tests", "test", "add", "test file", "test files"),
    BucketSpec("config", "config", "update", "configuration file", "configuration files"),
    BucketSpec("deps", "deps", "update", "dependency", "dependencies"),
    BucketSpec("style", "style", "update", "style file", "style files"),
    BucketSpec("refactor", "refactor", "refactor", "file", "files"),
    BucketSpec("build", "build", "update", "build file", "build files"),
    BucketSpec("ci", "ci", "update", "CI file", "CI files"),
    BucketSpec("chore", "chore", "update", "chore file", "chore files"),
)

BUCKET_ORDER: Tuple[str, ...] = tuple(spec.bucket for spec in BUCKETS)

# Bucket receiving the paths of each inferred type.
_TYPE_TO_BUCKET = {
    "test": "tests",
    "docs": "docs",
    "deps": "deps",
    "ci": "ci",
    "config": "config",
    "style": "style",
    "build": "build",
}


def group_changes(changes: Iterable[StagedChange]) -> Dict[str, List[str]]:
    """Sort staged changes into topic buckets.

    Returns a mapping with every bucket of :data:`BUCKET_ORDER` as a key
    and the raw ``status<TAB>path`` lines as values. Paths matching no
    type rule fall back on their status: deletions go to ``fixes``,
    additions to ``features`` and everything else to ``refactor``.
    """
    groups: Dict[str, List[str]] = {bucket: [] for bucket in BUCKET_ORDER}

    for change in changes:
        commit_type = infer_type(change.path)
        if commit_type is not None:
            bucket = _TYPE_TO_BUCKET[commit_type]
        elif change.status.startswith("D"):
            bucket = "fixes"
        elif change.status.startswith("A"):
            bucket = "features"
        else:
            bucket = "refactor"
        groups[bucket].append(change.line)

    return groups


def _describe(spec: BucketSpec, count: int) -> str:
    noun = spec.plural if count > 1 else spec.singular
    return f"{spec.verb} {count} {noun}"


def generate_grouped_commits(groups: Dict[str, List[str]]) -> List[GroupedCommitPlan]:
    """Build one commit plan per non-empty bucket, in :data:`BUCKET_ORDER`."""
    plans: List[GroupedCommitPlan] = []
    for spec in BUCKETS:
        files = groups.get(spec.bucket, [])
        if files:
            plans.append(
                GroupedCommitPlan(
                    type=spec.type,
                    description=_describe(spec, len(files)),
                    files=list(files),
                )
            )
    return plans
