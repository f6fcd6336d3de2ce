"""Embedding service: model selection, strategy, and cache-backed embeddings.

Model loading starts in the background on construction. Use
``wait_until_ready()`` or poll ``is_ready()`` before relying on latency.

    service = EmbeddingService("all-MiniLM-L6-v2")
    await service.wait_until_ready()
    vector = await service.get_embedding("git-helper", "Git workflow assistance")
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Literal, Optional, Sequence

import numpy as np

from skillscout.shared.config import DEFAULT_MODEL, default_cache_dir
from skillscout.shared.hashing import hash_content
from skillscout.shared.types import SkillSummary
from ..internal.cache import read_cached_embedding, write_cached_embedding
from ..internal.model import EmbeddingModel, Loader
from ..internal.models import ModelConfig, get_model_config
from ..internal.paths import get_embedding_path
from .similarity import VectorLike, cosine_similarity

EmbeddingStrategy = Literal["summary", "full"]
STRATEGIES = ("summary", "full")


class EmbeddingService:
    def __init__(
        self,
        model_name: str = DEFAULT_MODEL,
        strategy: EmbeddingStrategy = "summary",
        cache_dir: Optional[Path] = None,
        loader: Optional[Loader] = None,
        model_cache_folder: Optional[Path] = None,
    ):
        # Fail fast on configuration errors, before any loading starts.
        self.model_config: ModelConfig = get_model_config(model_name)
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown embedding strategy: {strategy}. Use one of: {', '.join(STRATEGIES)}")

        self.model_name = model_name
        self.strategy: EmbeddingStrategy = strategy
        self.cache_dir = Path(cache_dir) if cache_dir else default_cache_dir()
        self.model = EmbeddingModel(
            self.model_config,
            loader=loader,
            cache_folder=model_cache_folder,
        )

    @classmethod
    def from_config(cls, config, loader: Optional[Loader] = None) -> "EmbeddingService":
        return cls(
            model_name=config.embedding_model,
            strategy=config.embedding_strategy,
            cache_dir=config.get_cache_dir(),
            loader=loader,
        )

    # --- Readiness ---
    def is_ready(self) -> bool:
        return self.model.is_ready()

    async def wait_until_ready(self) -> None:
        await self.model.wait_until_ready()

    # --- Text preparation ---
    def prepare_text(self, name: str, description: str, full_content: Optional[str] = None) -> str:
        if self.strategy == "full" and full_content:
            return full_content
        return f"{name}: {description}"

    def cache_path_for(self, text: str) -> Path:
        return get_embedding_path(self.cache_dir, self.model_name, hash_content(text))

    # --- Embeddings ---
    def _is_valid_vector(self, vector: np.ndarray) -> bool:
        return vector.shape == (self.model_config.dimensions,) and bool(np.isfinite(vector).all())

    async def embed_text(self, text: str) -> np.ndarray:
        """Cache lookup, then model, then cache write. Key = hash of ``text``."""
        cache_path = self.cache_path_for(text)

        cached = await read_cached_embedding(cache_path)
        if cached is not None:
            if self._is_valid_vector(cached):
                return cached
            print(f"Recomputing unusable cached embedding: {cache_path}", file=sys.stderr)

        embedding = await self.model.embed(text)
        await write_cached_embedding(cache_path, embedding)
        return embedding

    async def get_embedding(
        self, name: str, description: str, full_content: Optional[str] = None
    ) -> np.ndarray:
        return await self.embed_text(self.prepare_text(name, description, full_content))

    async def get_skill_embedding(self, skill: SkillSummary) -> np.ndarray:
        return await self.get_embedding(skill.name, skill.description, skill.content)

    async def get_query_embedding(self, message: str) -> np.ndarray:
        # Queries use the summary form with an empty name.
        return await self.embed_text(f": {message}")

    async def precompute_skill_embeddings(self, skills: Sequence[SkillSummary]) -> int:
        """Warm the cache for ``skills``. Failures are reported, never raised.

        Returns the number of skills embedded successfully.
        """

        async def _one(skill: SkillSummary) -> bool:
            try:
                await self.get_skill_embedding(skill)
                return True
            except Exception as e:
                print(f"Failed to precompute embedding for '{skill.name}': {e}", file=sys.stderr)
                return False

        results = await asyncio.gather(*(_one(s) for s in skills))
        return sum(1 for ok in results if ok)

    def cosine_similarity(self, a: VectorLike, b: VectorLike) -> float:
        return cosine_similarity(a, b)


__all__ = ["EmbeddingService", "EmbeddingStrategy", "STRATEGIES"]
