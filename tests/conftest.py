import pytest


@pytest.fixture(autouse=True)
def _isolate_build_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep SITEFEED_* variables and stray .env files out of BuildConfig."""
    for name in ("SITEFEED_SITE_URL", "SITEFEED_PATH_PREFIX", "SITEFEED_OUT_DIR", "SITEFEED_SITE_NAME"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
