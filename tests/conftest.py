from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture
def dairies_file(monkeypatch: pytest.MonkeyPatch) -> Path:
    from src.milkroute.config import settings
    from src.milkroute.data.dairies_repository import load_dairies

    path = DATA_DIR / "chandigarh_dairies.json"
    monkeypatch.setattr(settings, "dairies_file", path)
    load_dairies.cache_clear()
    yield path
    load_dairies.cache_clear()
