import pytest


@pytest.fixture(autouse=True)
def github_env(monkeypatch):
    monkeypatch.delenv("GITHUB_API_ROOT", raising=False)
    for key in ("GITHUB_TOKEN", "GH_TOKEN", "MAX_TEMPLATES", "MIN_STARS"):
        monkeypatch.delenv(key, raising=False)
