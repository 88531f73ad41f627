"""
Heuristics for classifying staged changes.

The classifier infers commit types and scopes from file paths and
status codes only; file contents are never inspected. Type inference
is a fixed, ordered list of substring checks where the first match
wins. It is intentionally simple and deterministic so that it can be
unit tested without a repository.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence, Tuple

from satucommit.grouping.group_model import ChangeSet
from satucommit.message.catalog import COMMON_SCOPES
from satucommit.vcs.git_client import StagedChange


def _contains_any(*needles: str) -> Callable[[str], bool]:
    return lambda path: any(needle in path for needle in needles)


# Evaluated in order; the first matching predicate decides the type.
TYPE_RULES: Tuple[Tuple[str, Callable[[str], bool]], ...] = (
    ("test", _contains_any("test", "spec")),
    ("docs", lambda path: "doc" in path or path.endswith(".md")),
    ("deps", _contains_any("package.json", "yarn.lock", "package-lock.json")),
    ("ci", _contains_any(".github", ".gitlab", "jenkins", "travis")),
    ("config", _contains_any("config", ".env")),
    ("style", _contains_any("style", "css", "scss", "less")),
    ("build", _contains_any("build", "webpack", "vite", "rollup")),
)


def infer_type(file_path: str) -> Optional[str]:
    """Infer a commit type from a file path.

    Parameters
    ----------
    file_path : str
        Path of the changed file relative to the repository root.

    Returns
    -------
    Optional[str]
        One of ``test``, ``docs``, ``deps``, ``ci``, ``config``,
        ``style`` or ``build``, or ``None`` when no rule matches.
    """
    for commit_type, matches in TYPE_RULES:
        if matches(file_path):
            return commit_type
    return None


def infer_scope(file_path: str, scopes: Sequence[str] = COMMON_SCOPES) -> Optional[str]:
    """Return the lower-cased top-level directory if it is a known scope.

    Files at the repository root have no scope.
    """
    parts = file_path.split("/")
    if len(parts) > 1:
        candidate = parts[0].lower()
        if candidate in scopes:
            return candidate
    return None


def classify_changes(
    changes: Iterable[StagedChange],
    scopes: Sequence[str] = COMMON_SCOPES,
) -> ChangeSet:
    """Classify staged changes into status buckets, types and scopes.

    Parameters
    ----------
    changes : Iterable[StagedChange]
        Staged changes in the order Git reported them.
    scopes : Sequence[str]
        Vocabulary of recognised scopes.

    Returns
    -------
    ChangeSet
        Status buckets preserve input order. Changes with a status code
        other than A/??/M/D/R go to ``unclassified`` but still take part
        in type and scope inference.
    """
    result = ChangeSet()

    for change in changes:
        status, path = change.status, change.path

        if status.startswith("A") or status.startswith("??"):
            result.added.append(path)
        elif status.startswith("M"):
            result.modified.append(path)
        elif status.startswith("D"):
            result.deleted.append(path)
        elif status.startswith("R"):
            result.renamed.append(path)
        else:
            result.unclassified.append(path)

        commit_type = infer_type(path)
        if commit_type is not None:
            result.types.add(commit_type)

        scope = infer_scope(path, scopes)
        if scope is not None:
            result.add_scope(scope)

    return result
