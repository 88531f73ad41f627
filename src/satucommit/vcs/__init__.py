"""
Version control system (VCS) integration.

Wraps the Git command line: repository detection, listing staged
changes and committing. See :mod:`satucommit.vcs.git_client`.
"""

from .git_client import (  # noqa: F401
    GitClient,
    GitError,
    StagedChange,
    collect_staged_changes,
    parse_name_status,
)
