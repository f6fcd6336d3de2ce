"""Local sentence-embedding model with a single-flight background load.

States: UNINITIALIZED -> LOADING -> READY, or LOADING -> FAILED (terminal).
The load runs once on a worker thread; every caller awaits the same future,
so concurrent first calls never load the weights twice and all observe the
same outcome.
"""

from __future__ import annotations

import asyncio
import sys
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional, Protocol

import numpy as np

from skillscout.shared.errors import EmbeddingError, ModelLoadError
from .models import ModelConfig

# Model loads are rare and heavy; two workers let a model comparison overlap.
_LOAD_EXECUTOR = ThreadPoolExecutor(max_workers=2, thread_name_prefix="skillscout-model")


class Encoder(Protocol):
    def encode(self, sentences: Any, **kwargs: Any) -> Any: ...


Loader = Callable[[ModelConfig, Optional[Path]], Encoder]


class ModelState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


def load_sentence_transformer(config: ModelConfig, cache_folder: Optional[Path] = None) -> Encoder:
    """Build a mean-pooling SentenceTransformer for the registry entry."""
    from sentence_transformers import SentenceTransformer, models  # heavy import

    cache_dir = str(cache_folder) if cache_folder else None
    word_embedding = models.Transformer(
        config.name,
        max_seq_length=config.max_tokens,
        cache_dir=cache_dir,
    )
    pooling = models.Pooling(
        word_embedding.get_word_embedding_dimension(),
        pooling_mode="mean",
    )
    return SentenceTransformer(modules=[word_embedding, pooling], device="cpu")


class EmbeddingModel:
    """Wraps a pre-trained sentence-embedding model.

    Loading starts on construction unless ``autoload=False``; ``start()`` is
    idempotent. ``embed()`` waits for readiness before encoding.
    """

    def __init__(
        self,
        config: ModelConfig,
        loader: Optional[Loader] = None,
        cache_folder: Optional[Path] = None,
        autoload: bool = True,
    ):
        self.config = config
        self.cache_folder = cache_folder
        self._loader = loader or load_sentence_transformer
        self._encoder: Optional[Encoder] = None
        self._future: Optional[Future] = None
        self._start_lock = threading.Lock()
        if autoload:
            self.start()

    # --- Lifecycle ---
    def start(self) -> None:
        with self._start_lock:
            if self._future is None:
                self._future = _LOAD_EXECUTOR.submit(self._load)

    def _load(self) -> Encoder:
        try:
            encoder = self._loader(self.config, self.cache_folder)
        except Exception as e:
            print(f"Embedding model load failed ({self.config.name}): {e}", file=sys.stderr)
            raise ModelLoadError(
                f"Failed to load embedding model {self.config.name}: {e}"
            ) from e
        self._encoder = encoder
        return encoder

    @property
    def state(self) -> ModelState:
        future = self._future
        if future is None:
            return ModelState.UNINITIALIZED
        if not future.done():
            return ModelState.LOADING
        if future.exception() is not None:
            return ModelState.FAILED
        return ModelState.READY

    def is_ready(self) -> bool:
        return self.state is ModelState.READY

    async def wait_until_ready(self) -> None:
        """Suspend until READY; re-raises the load failure when FAILED."""
        self.start()
        await asyncio.wrap_future(self._future)

    # --- Encoding ---
    def _encode(self, text: str) -> np.ndarray:
        vector = self._encoder.encode(
            text,
            normalize_embeddings=True,
            convert_to_numpy=True,
            show_progress_bar=False,
        )
        vector = np.asarray(vector, dtype=np.float32)
        if vector.ndim != 1:
            vector = vector.reshape(-1)
        return vector

    async def embed(self, text: str) -> np.ndarray:
        """Mean-pooled, L2-normalized float32 vector for ``text``."""
        await self.wait_until_ready()
        try:
            return await asyncio.to_thread(self._encode, text)
        except Exception as e:
            raise EmbeddingError(f"Failed to generate embedding: {e}") from e

    @property
    def dimensions(self) -> int:
        return self.config.dimensions


__all__ = ["EmbeddingModel", "ModelState", "Encoder", "Loader", "load_sentence_transformer"]
