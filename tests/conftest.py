import logging

import pytest


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path, monkeypatch):
    """Keep tests away from the real user config and environment.

    ``HOME`` points at a temporary directory so the default
    ``~/.gy_config.json`` is never the operator's real file, and the
    variables gy reads are cleared.
    """
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    for name in ("ANTHROPIC_API_KEY", "GY_EDIT_MODE", "EDITOR"):
        monkeypatch.delenv(name, raising=False)
    yield
    # The CLI calls logging.basicConfig(force=True); under CliRunner that
    # binds a root handler to a stream that is closed once invoke() returns.
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
