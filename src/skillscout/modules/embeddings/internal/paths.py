"""Cache path layout: <base>/embeddings/<model-name>/<sha256>.bin"""

from pathlib import Path


def get_embedding_cache_dir(base_dir: Path, model_name: str) -> Path:
    return base_dir / "embeddings" / model_name


def get_embedding_path(base_dir: Path, model_name: str, content_hash: str) -> Path:
    return get_embedding_cache_dir(base_dir, model_name) / f"{content_hash}.bin"


__all__ = ["get_embedding_cache_dir", "get_embedding_path"]
