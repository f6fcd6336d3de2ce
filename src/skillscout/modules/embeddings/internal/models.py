"""Registry of local sentence-embedding models.

Smaller models (L3, L6) are faster but less accurate; larger ones (L12, mpnet)
are more accurate but slower. all-MiniLM-L6-v2 is the default trade-off.
"""

from dataclasses import dataclass
from typing import Dict

from skillscout.shared.config import DEFAULT_MODEL
from skillscout.shared.errors import UnknownModelError


@dataclass(frozen=True)
class ModelConfig:
    name: str  # Hugging Face repo id
    dimensions: int
    max_tokens: int


MODELS: Dict[str, ModelConfig] = {
    "paraphrase-MiniLM-L3-v2": ModelConfig(
        name="sentence-transformers/paraphrase-MiniLM-L3-v2",
        dimensions=384,
        max_tokens=128,
    ),
    "all-MiniLM-L6-v2": ModelConfig(
        name="sentence-transformers/all-MiniLM-L6-v2",
        dimensions=384,
        max_tokens=256,
    ),
    "all-MiniLM-L12-v2": ModelConfig(
        name="sentence-transformers/all-MiniLM-L12-v2",
        dimensions=384,
        max_tokens=256,
    ),
    "all-mpnet-base-v2": ModelConfig(
        name="sentence-transformers/all-mpnet-base-v2",
        dimensions=768,
        max_tokens=384,
    ),
    "bge-small-en-v1.5": ModelConfig(
        name="BAAI/bge-small-en-v1.5",
        dimensions=384,
        max_tokens=512,
    ),
}


def get_model_config(model_name: str) -> ModelConfig:
    config = MODELS.get(model_name)
    if config is None:
        raise UnknownModelError(
            f"Unknown model: {model_name}. Available models: {', '.join(MODELS)}"
        )
    return config


__all__ = ["ModelConfig", "MODELS", "DEFAULT_MODEL", "get_model_config"]
