import sys
from pathlib import Path

import pytest

# Ensure `import labquote` works when running `pytest` without needing PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from labquote.config import get_settings  # noqa: E402
from labquote.core.canonical import SelectionItem  # noqa: E402
from labquote.core.selection import MemoryStorage, SelectionStore  # noqa: E402

_ENV_VARS = ("API_URL", "REQUEST_TIMEOUT", "CART_STORAGE_DIR", "CART_SLOT", "APP_NAME", "DEBUG", "LOG_VERBOSITY")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CART_STORAGE_DIR", str(tmp_path / "cart"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def memory_store() -> SelectionStore:
    return SelectionStore(MemoryStorage(), slot="test_cart")


@pytest.fixture
def microscope() -> SelectionItem:
    return SelectionItem(id=7, name="Binocular Microscope", brand="Olympus", slug="binocular-microscope")


@pytest.fixture
def centrifuge() -> SelectionItem:
    return SelectionItem(id=12, name="Benchtop Centrifuge", brand="Eppendorf", slug="benchtop-centrifuge")
