import shutil
from pathlib import Path

import pytest
from loguru import logger

from mdmv.filesystem import Filesystem

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def fs(tmp_path):
    """Filesystem rooted at a fresh temporary directory."""
    return Filesystem(tmp_path)


@pytest.fixture
def copy_testdata(tmp_path):
    """Copy a file from tests/testdata to a path under tmp_path."""
    def _copy(name: str, dest: str) -> Path:
        target = tmp_path / dest
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(TESTDATA / name, target)
        return target
    return _copy


@pytest.fixture
def log_messages():
    """Collect loguru records as 'LEVEL | message' strings."""
    messages = []
    handler_id = logger.add(messages.append, format="{level} | {message}", level="DEBUG")
    yield messages
    logger.remove(handler_id)


def logged(messages, text: str, level: str = "WARNING") -> bool:
    return any(m.startswith(level) and text in m for m in messages)
