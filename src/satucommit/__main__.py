"""
Thin wrapper to invoke the satucommit CLI.

Running ``python -m satucommit`` is equivalent to running the
``satucommit`` console script installed via ``pyproject.toml``.
"""

from satucommit.cli import main


if __name__ == "__main__":
    main(prog_name="satucommit")
