"""Pytest configuration and fixtures."""
import logging
import sys
from pathlib import Path
from typing import Generator, List

import pytest

# Add the src directory to the Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

CONFIG_VARS = (
    "LOG_LEVEL",
    "LOG_DIR",
    "DISCARD_LIMIT",
    "MAX_RETRIES",
    "ELEMENT_PRESET",
    "ELEMENT_KIND",
    "ELEMENT_NAME",
    "ELEMENT_LOW",
    "ELEMENT_HIGH",
)


class Recorder:
    """Collects everything a reader writes to its output sink."""

    def __init__(self):
        self.messages: List[str] = []

    def __call__(self, text: str) -> None:
        self.messages.append(text)

    @property
    def text(self) -> str:
        return "".join(self.messages)


@pytest.fixture
def emit() -> Recorder:
    """Output sink that records prompts and retry messages."""
    return Recorder()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch) -> None:
    """Make sure configuration comes only from what a test sets."""
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Undo setup_logging() changes to the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
