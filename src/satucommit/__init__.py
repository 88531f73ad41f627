"""
Top-level package for satucommit.

The command line entry point lives in :mod:`satucommit.cli`; callers
embedding the tool (for example automated agents) should use the facade
in :mod:`satucommit.api`.
"""

__all__ = ["__version__"]

__version__ = "1.0.0"
