from .cache import CACHE_DTYPE, read_cached_embedding, write_cached_embedding
from .model import EmbeddingModel, Encoder, Loader, ModelState, load_sentence_transformer
from .models import DEFAULT_MODEL, MODELS, ModelConfig, get_model_config
from .paths import get_embedding_cache_dir, get_embedding_path

__all__ = [
    "CACHE_DTYPE",
    "read_cached_embedding",
    "write_cached_embedding",
    "EmbeddingModel",
    "Encoder",
    "Loader",
    "ModelState",
    "load_sentence_transformer",
    "DEFAULT_MODEL",
    "MODELS",
    "ModelConfig",
    "get_model_config",
    "get_embedding_cache_dir",
    "get_embedding_path",
]
