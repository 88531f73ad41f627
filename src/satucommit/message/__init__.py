"""
Commit message catalog and synthesis.

See :mod:`satucommit.message.catalog` for the type, gitmoji and scope
tables and :mod:`satucommit.message.generator` for message formatting.
"""

from .catalog import COMMIT_TYPES, COMMON_SCOPES, GITMOJIS, TYPE_PRIORITY  # noqa: F401
from .generator import (  # noqa: F401
    describe_changes,
    format_commit_message,
    generate_commit_message,
    select_scope,
    select_type,
    suggest_type,
)
