"""
Classification and grouping of staged changes.

See :mod:`satucommit.grouping.change_classifier` for type and scope
inference, :mod:`satucommit.grouping.grouper` for topic grouping and
:mod:`satucommit.grouping.group_model` for the data models.
"""

from .change_classifier import classify_changes, infer_scope, infer_type  # noqa: F401
from .group_model import ChangeSet, CommitGroup, GroupedCommitPlan  # noqa: F401
from .grouper import generate_grouped_commits, group_changes  # noqa: F401
