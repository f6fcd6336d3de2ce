"""Public API for the embeddings module."""

from .internal.models import DEFAULT_MODEL, MODELS, ModelConfig
from .internal.model import ModelState
from .public.service import STRATEGIES, EmbeddingService, EmbeddingStrategy
from .public.similarity import cosine_similarity

__all__ = [
    "DEFAULT_MODEL",
    "MODELS",
    "ModelConfig",
    "ModelState",
    "STRATEGIES",
    "EmbeddingService",
    "EmbeddingStrategy",
    "cosine_similarity",
]
