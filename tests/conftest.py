from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from models.diff import ChangeType, DiffPiece
from services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    """Point the config manager at a fresh directory for every test."""
    monkeypatch.setenv("DIFF_VIEW_CONFIG_DIR", str(tmp_path / "config"))
    ConfigManager._instance = None
    yield tmp_path / "config"
    ConfigManager._instance = None


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as c:
        yield c


def piece(text: str | None, change: ChangeType = ChangeType.UNCHANGED, sub=None) -> DiffPiece:
    return DiffPiece(type=change, text=text, sub_pieces=sub)
