from .service import STRATEGIES, EmbeddingService, EmbeddingStrategy
from .similarity import cosine_similarity

__all__ = ["EmbeddingService", "EmbeddingStrategy", "STRATEGIES", "cosine_similarity"]
