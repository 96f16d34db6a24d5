"""Shared pytest configuration and fixtures for all tests."""

import logging
from pathlib import Path

import pytest

# "this is some text\nthis is another line" -> bytes=38, words=8, lines=1
PLAIN_TEXT = "this is some text\nthis is another line"

# Mixed multi-byte and ASCII -> bytes=96, chars=48, words=8, lines=1
EMOJI_TEXT = "hello😀😃😄😁😆😅😂🤣😀😃😄😁 hello world 12345\n67890😀 😃 😄 😁"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external resources")
    config.addinivalue_line("markers", "cli: command line tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def rwc_home(tmp_path: Path, monkeypatch) -> Path:
    """Point RWC_HOME at an empty directory so no user config leaks into tests."""
    home = tmp_path / ".rwc"
    home.mkdir()
    monkeypatch.setenv("RWC_HOME", str(home))
    return home


@pytest.fixture(autouse=True)
def reset_rwc_logger():
    """Drop handlers installed by setup_logging (they may hold closed streams)."""
    yield
    logger = logging.getLogger("rwc")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def plain_file(tmp_path: Path) -> Path:
    path = tmp_path / "plain.txt"
    path.write_bytes(PLAIN_TEXT.encode("utf-8"))
    return path


@pytest.fixture
def emoji_file(tmp_path: Path) -> Path:
    path = tmp_path / "emoji.txt"
    path.write_bytes(EMOJI_TEXT.encode("utf-8"))
    return path


@pytest.fixture
def plain_bytes() -> bytes:
    return PLAIN_TEXT.encode("utf-8")


@pytest.fixture
def emoji_bytes() -> bytes:
    return EMOJI_TEXT.encode("utf-8")
