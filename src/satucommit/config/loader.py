"""
Configuration loader for satucommit.

The tool reads an optional JSON configuration file named ``config.json``
located in the ``~/.satucommit/`` directory. The file may set:

- ``default_description`` (str): description used when none is given.
- ``extra_scopes`` (list of str): scopes recognised in addition to the
  built-in vocabulary.

A missing file means "use the defaults". If the file is malformed,
contains unknown keys or values of the wrong type, a
:class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from satucommit.message.catalog import COMMON_SCOPES, DEFAULT_DESCRIPTION


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


CONFIG_FILENAME = "config.json"

DEFAULTS: Dict[str, Any] = {
    "default_description": DEFAULT_DESCRIPTION,
    "extra_scopes": [],
}


class ConfigError(Exception):
    """Raised when the configuration file is invalid."""

    pass


def _get_config_directory() -> Path:
    """Return the user-level configuration directory, ``~/.satucommit/``."""
    return Path.home() / ".satucommit"


def get_config_path() -> Path:
    return _get_config_directory() / CONFIG_FILENAME


def load_config() -> Dict[str, Any]:
    """Load the user configuration merged over :data:`DEFAULTS`.

    Returns:
        A dictionary with the keys ``default_description`` (str) and
        ``extra_scopes`` (list of lower-cased str).

    Raises:
        ConfigError: If the file exists but cannot be parsed or fails
            validation.
    """
    config_path = get_config_path()
    config: Dict[str, Any] = {
        "default_description": DEFAULTS["default_description"],
        "extra_scopes": list(DEFAULTS["extra_scopes"]),
    }

    if not config_path.exists():
        logger.debug("No configuration file at %s; using defaults", config_path)
        return config

    try:
        content = config_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")

    unknown = sorted(set(data) - set(DEFAULTS))
    if unknown:
        logger.error("Configuration file has unknown keys: %s", unknown)
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    if "default_description" in data:
        description = data["default_description"]
        if not isinstance(description, str) or not description.strip():
            raise ConfigError("'default_description' must be a non-empty string")
        config["default_description"] = description.strip()

    if "extra_scopes" in data:
        scopes = data["extra_scopes"]
        if not isinstance(scopes, list) or not all(isinstance(s, str) for s in scopes):
            raise ConfigError("'extra_scopes' must be a list of strings")
        config["extra_scopes"] = [s.strip().lower() for s in scopes if s.strip()]

    logger.debug("Loaded configuration from: %s", config_path)
    logger.debug("Configuration data: %s", config)
    return config


def scope_vocabulary(config: Dict[str, Any]) -> Tuple[str, ...]:
    """Return the built-in scopes followed by the configured extra ones."""
    extra: List[str] = [s for s in config.get("extra_scopes", []) if s not in COMMON_SCOPES]
    return COMMON_SCOPES + tuple(dict.fromkeys(extra))
