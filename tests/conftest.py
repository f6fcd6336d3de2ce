"""Shared pytest fixtures for SkillScout."""

import pytest

from tests.fakes import FakeLoader


@pytest.fixture
def fake_loader() -> FakeLoader:
    return FakeLoader()


@pytest.fixture(autouse=True)
def _isolate_skillscout_env(tmp_path, monkeypatch):
    """Keep tests off ~/.cache and ~/.skillscout and free of developer overrides."""
    for key in (
        "SKILLSCOUT_SKILLS_DIR",
        "SKILLSCOUT_CACHE_DIR",
        "SKILLSCOUT_EMBEDDING_MODEL",
        "SKILLSCOUT_EMBEDDING_STRATEGY",
        "SKILLSCOUT_MATCH_STRATEGY",
        "SKILLSCOUT_SEMANTIC_THRESHOLD",
        "SKILLSCOUT_LOCAL_THRESHOLD",
        "SKILLSCOUT_TOP_K",
        "SKILLSCOUT_META_GATE",
        "SKILLSCOUT_DEBUG",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg-cache"))
