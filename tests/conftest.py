import os

import pytest

from wedge_clock.config import get_settings
from wedge_clock.config.settings import Settings
from wedge_clock.clock.face import Viewport


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep settings independent of the developer's environment and config.yaml."""
    for key in list(os.environ):
        if key.upper().startswith("WEDGE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("WEDGE_OUTPUT_PATH", str(tmp_path / "out" / "clock.svg"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings(tmp_path):
    """Settings for renderer and service tests."""
    return Settings(
        width=400,
        height=400,
        tick_length=10,
        output_path=tmp_path / "cache" / "clock.svg",
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture
def square():
    """400x400 viewport."""
    return Viewport.from_size(400, 400)


@pytest.fixture
def landscape():
    """400x300 viewport."""
    return Viewport.from_size(400, 300)
