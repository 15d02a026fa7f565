from __future__ import annotations

import logging
from pathlib import Path

import pytest

from liteconfig.config import ConfigStore
from liteconfig.logging_utils import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers[:]:
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def test_setup_logging_console_only():
    setup_logging("debug")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)


def test_setup_logging_writes_file(tmp_path: Path):
    log_file = tmp_path / "logs" / "liteconfig.log"
    setup_logging(logging.INFO, log_file=log_file)

    ConfigStore(tmp_path / "cfg" / "app.json")
    for h in logging.getLogger().handlers:
        h.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "liteconfig.config_store - INFO - created configuration file" in text


def test_setup_logging_replaces_handlers(tmp_path: Path):
    setup_logging("info", log_file=tmp_path / "a.log")
    setup_logging("info", log_file=tmp_path / "b.log")

    files = [h.baseFilename for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
    assert files == [str(tmp_path / "b.log")]
