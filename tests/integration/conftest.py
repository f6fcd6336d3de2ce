"""Integration-test-only pytest fixtures for SkillScout."""

import pytest

from skillscout.modules.embeddings.internal import model as model_module
from skillscout.modules.matching import default_matcher
from tests.fakes import FakeLoader


@pytest.fixture(autouse=True)
def fake_sentence_transformer(monkeypatch: pytest.MonkeyPatch):
    """Replace the real model loader so CLI runs never download weights."""
    loader = FakeLoader()
    monkeypatch.setattr(model_module, "load_sentence_transformer", loader)
    default_matcher.cache_clear()
    yield loader
    default_matcher.cache_clear()
