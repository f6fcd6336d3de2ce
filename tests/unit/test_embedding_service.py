"""Unit tests for EmbeddingService (cache-backed embeddings)."""

import numpy as np
import pytest

from skillscout.modules.embeddings import EmbeddingService
from skillscout.shared.config import Config
from skillscout.shared.errors import UnknownModelError
from skillscout.shared.hashing import hash_content
from skillscout.shared.types import SkillSummary
from tests.fakes import FakeEncoder, FakeLoader


@pytest.fixture
def service(tmp_path, fake_loader):
    return EmbeddingService(cache_dir=tmp_path / "cache", loader=fake_loader)


class TestConstruction:
    def test_unknown_model_raises_immediately(self, fake_loader):
        with pytest.raises(UnknownModelError, match="Unknown model: nope"):
            EmbeddingService("nope", loader=fake_loader)
        assert fake_loader.loaded == []

    def test_unknown_model_is_value_error(self, fake_loader):
        with pytest.raises(ValueError):
            EmbeddingService("nope", loader=fake_loader)

    def test_unknown_strategy_raises(self, fake_loader):
        with pytest.raises(ValueError, match="Unknown embedding strategy"):
            EmbeddingService(strategy="hybrid", loader=fake_loader)

    def test_from_config(self, tmp_path, fake_loader):
        cfg = Config(
            embedding_model="bge-small-en-v1.5",
            embedding_strategy="full",
            cache_dir=tmp_path,
        )
        service = EmbeddingService.from_config(cfg, loader=fake_loader)
        assert service.model_name == "bge-small-en-v1.5"
        assert service.strategy == "full"
        assert service.cache_dir == tmp_path

    def test_default_cache_dir_uses_xdg(self, tmp_path, fake_loader):
        service = EmbeddingService(loader=fake_loader)
        assert service.cache_dir == tmp_path / "xdg-cache" / "skillscout"

    @pytest.mark.asyncio
    async def test_readiness(self, service):
        await service.wait_until_ready()
        assert service.is_ready()


class TestPrepareText:
    def test_summary(self, service):
        assert service.prepare_text("pdf", "PDF tools", "# full body") == "pdf: PDF tools"

    def test_full_uses_content(self, tmp_path, fake_loader):
        service = EmbeddingService(strategy="full", cache_dir=tmp_path, loader=fake_loader)
        assert service.prepare_text("pdf", "PDF tools", "# full body") == "# full body"

    def test_full_falls_back_to_summary(self, tmp_path, fake_loader):
        service = EmbeddingService(strategy="full", cache_dir=tmp_path, loader=fake_loader)
        assert service.prepare_text("pdf", "PDF tools") == "pdf: PDF tools"


class TestCaching:
    @pytest.mark.asyncio
    async def test_second_call_is_cache_hit(self, service, fake_loader):
        first = await service.get_embedding("git-helper", "Git workflow assistance")
        second = await service.get_embedding("git-helper", "Git workflow assistance")

        assert np.array_equal(first, second)
        assert fake_loader.encoder.calls == ["git-helper: Git workflow assistance"]

    @pytest.mark.asyncio
    async def test_cache_file_layout(self, service, tmp_path):
        await service.get_embedding("pdf", "PDF tools")
        expected = (
            tmp_path
            / "cache"
            / "embeddings"
            / "all-MiniLM-L6-v2"
            / f"{hash_content('pdf: PDF tools')}.bin"
        )
        assert expected.exists()
        assert expected.stat().st_size == 384 * 4

    @pytest.mark.asyncio
    async def test_cache_survives_new_service(self, tmp_path):
        first_loader, second_loader = FakeLoader(), FakeLoader()
        cache_dir = tmp_path / "cache"
        first = EmbeddingService(cache_dir=cache_dir, loader=first_loader)
        vector = await first.get_embedding("pdf", "PDF tools")

        second = EmbeddingService(cache_dir=cache_dir, loader=second_loader)
        cached = await second.get_embedding("pdf", "PDF tools")

        assert cached.tobytes() == vector.tobytes()
        await second.wait_until_ready()
        assert second_loader.encoder.calls == []

    @pytest.mark.asyncio
    async def test_query_embedding_uses_empty_name(self, service, fake_loader, tmp_path):
        await service.get_query_embedding("merge my branch")
        assert fake_loader.encoder.calls == [": merge my branch"]
        assert service.cache_path_for(": merge my branch").exists()

    @pytest.mark.asyncio
    async def test_strategies_use_different_keys(self, tmp_path, fake_loader):
        skill = SkillSummary(name="pdf", description="PDF tools", content="# PDF\nExtract tables")
        summary = EmbeddingService(cache_dir=tmp_path, loader=fake_loader)
        full = EmbeddingService(strategy="full", cache_dir=tmp_path, loader=FakeLoader())
        await summary.get_skill_embedding(skill)
        await full.get_skill_embedding(skill)
        files = list((tmp_path / "embeddings" / "all-MiniLM-L6-v2").glob("*.bin"))
        assert len(files) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "stored",
        [np.full(384, np.nan, dtype=np.float32), np.ones(128, dtype=np.float32)],
        ids=["non-finite", "wrong-dimensions"],
    )
    async def test_unusable_cache_entry_is_recomputed(self, service, fake_loader, stored, capsys):
        text = "pdf: PDF tools"
        path = service.cache_path_for(text)
        path.parent.mkdir(parents=True)
        path.write_bytes(stored.astype("<f4").tobytes())

        vector = await service.embed_text(text)

        assert vector.shape == (384,)
        assert np.isfinite(vector).all()
        assert fake_loader.encoder.calls == [text]
        assert "unusable cached embedding" in capsys.readouterr().err
        assert path.read_bytes() == vector.astype("<f4").tobytes()

    def test_cosine_similarity_delegates(self, service):
        assert service.cosine_similarity([1, 0], [1, 0]) == pytest.approx(1.0)


class TestPrecompute:
    @pytest.mark.asyncio
    async def test_counts_successes(self, service):
        skills = [
            SkillSummary(name="pdf", description="PDF tools"),
            SkillSummary(name="git-helper", description="Git workflow"),
        ]
        assert await service.precompute_skill_embeddings(skills) == 2

    @pytest.mark.asyncio
    async def test_failures_are_isolated(self, tmp_path, capsys):
        class PickyEncoder(FakeEncoder):
            def encode(self, sentences, **kwargs):
                if "broken" in sentences:
                    raise RuntimeError("cannot encode")
                return super().encode(sentences, **kwargs)

        service = EmbeddingService(cache_dir=tmp_path, loader=FakeLoader(PickyEncoder))
        skills = [
            SkillSummary(name="good", description="works fine"),
            SkillSummary(name="bad", description="broken description"),
            SkillSummary(name="also-good", description="works too"),
        ]

        assert await service.precompute_skill_embeddings(skills) == 2
        assert "Failed to precompute embedding for 'bad'" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_empty_list(self, service):
        assert await service.precompute_skill_embeddings([]) == 0
