"""
Pytest configuration shared by all sciformat tests.

Keeps log files and user configuration out of the test run.
"""

import os
import tempfile
from pathlib import Path

import pytest

# Must happen before any sciformat module creates its logger
_TEST_HOME = Path(tempfile.mkdtemp(prefix="sciformat-tests-"))
os.environ["SCIFORMAT_LOG_DIR"] = str(_TEST_HOME / "logs")
os.environ["SCIFORMAT_CONFIG"] = str(_TEST_HOME / "missing-config.toml")
os.environ.pop("SCIFORMAT_ISOTOPE_LIMIT", None)
os.environ.pop("SCIFORMAT_CONSOLE_LOGS", None)

from sciformat.core import config as config_module  # noqa: E402
from sciformat.core.config import FormatterConfig  # noqa: E402
from sciformat.text_formatting.pipeline import ScientificFormatter  # noqa: E402


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """Each test starts from a fresh global config loader."""
    config_module._config_loader = None
    yield
    config_module._config_loader = None


@pytest.fixture
def default_config():
    return FormatterConfig()


@pytest.fixture
def formatter(default_config):
    return ScientificFormatter(default_config)


@pytest.fixture
def write_config(tmp_path):
    """Write a ``[sciformat]`` TOML file and return its path."""

    def _write(body: str) -> Path:
        path = tmp_path / "config.toml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write
