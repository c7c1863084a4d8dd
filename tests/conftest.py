# tests/conftest.py
"""
Pytest configuration for pelp tests.

Puts the repository root on the import path and keeps the module level
logging state of pelp.logs from leaking between tests.
"""

import os
import sys

import pytest

# Add repository root to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pelp.logs import reset_logging  # noqa: E402


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Environment with no PELP_* variables and HOME pointing at a temp dir."""
    for name in ("PELP_PROFILE", "PELP_DEVICE", "PELP_CONFIG", "PELP_LOG_FILE", "PELP_NO_CLEAR", "SUDO_HOME"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


SAMPLE_CONFIG = """
version = "1"

[[profiles.esp32]]
color = "31"
trigger = "ERROR"
where = "anywhere"
replace = false
replace_with = ""
ignore = false

[[profiles.esp32]]
color = "32"
trigger = "I ("
where = "start of line"
replace = true
replace_with = "INFO ("
ignore = false

[[profiles.esp32]]
color = "33"
trigger = "W ("
where = "sol"
replace = false
replace_with = ""
ignore = true

[[profiles.quiet]]
color = "90"
trigger = "heartbeat"
where = ""
replace = false
replace_with = ""
ignore = false
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "pelp.toml"
    path.write_text(SAMPLE_CONFIG, encoding="utf-8")
    return path
