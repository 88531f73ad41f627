import logging

import pytest


@pytest.fixture(autouse=True)
def isolate_user_config(tmp_path, monkeypatch):
    """Point the user-level configuration directory at a temporary path.

    Tests must never pick up a real ``~/.satucommit/config.json``. Tests
    that need a configuration file can request this fixture and write
    ``config.json`` into the returned directory.
    """
    config_dir = tmp_path / "satucommit_home"
    monkeypatch.setattr(
        "satucommit.config.loader._get_config_directory", lambda: config_dir
    )
    return config_dir


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo ``logging.basicConfig(force=True)`` calls made by the CLI.

    The CLI attaches a stream handler bound to the runner's (later
    closed) stderr; leaving it on the root logger would break logging in
    subsequent tests.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
