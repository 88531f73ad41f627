"""
Configuration loading for satucommit.

Provides a loader for the optional user configuration file. See
:mod:`satucommit.config.loader` for implementation details.
"""

from .loader import ConfigError, load_config, scope_vocabulary  # noqa: F401
