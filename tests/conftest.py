from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.api import deps

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    """The real rules file at the project root."""
    path = PROJECT_ROOT / "rules.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Rules not found at {path}")
    return path


@pytest.fixture
def app_client(rules_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """
    Full application client, seeded from the real rules file.
    Cached settings, rules and the store singleton are reset around each test.
    """
    from src.api.main import app

    monkeypatch.setenv("BANK_RULES_PATH", str(rules_path))
    deps.get_settings.cache_clear()
    deps._load_rules_cached.cache_clear()
    deps.reset_account_store()

    with TestClient(app) as client:
        yield client

    deps.get_settings.cache_clear()
    deps._load_rules_cached.cache_clear()
    deps.reset_account_store()
