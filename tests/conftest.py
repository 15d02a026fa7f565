from __future__ import annotations

from pathlib import Path
import pytest

from liteconfig.registry import Registry


@pytest.fixture()
def config_dir(tmp_path: Path) -> Path:
    """
    an empty directory for configuration files.
    stores created by tests write their json here.
    """
    d = tmp_path / "cfg"
    d.mkdir()
    return d


@pytest.fixture()
def registry(config_dir: Path) -> Registry:
    return Registry().initialize(str(config_dir), "app")
