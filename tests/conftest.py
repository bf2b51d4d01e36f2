from pathlib import Path

import pytest
import structlog

from jumpmap.config import set_config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path: Path):
    """Keep tests away from the real ~/.jumpmap config and bookmarks."""
    monkeypatch.setenv("JUMPMAP_CONFIG", str(tmp_path / "jumpmap-config.yaml"))
    for name in ("JUMPMAP_STORE__PATH", "JUMPMAP_DISPLAY__COLORS", "JUMPMAP_LOGGING__LEVEL"):
        monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)
    structlog.reset_defaults()
