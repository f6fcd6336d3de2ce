"""Shared configuration, types and helpers."""

from .config import Config, SKILLSCOUT_HOME, DEFAULT_MODEL, default_cache_dir
from .errors import (
    EmbeddingError,
    ModelLoadError,
    SkillScoutError,
    UnknownModelError,
    VectorLengthMismatchError,
)
from .hashing import hash_content, hash_skills
from .types import MatchResult, SkillMatch, SkillSummary

__all__ = [
    "Config",
    "SKILLSCOUT_HOME",
    "DEFAULT_MODEL",
    "default_cache_dir",
    "EmbeddingError",
    "ModelLoadError",
    "SkillScoutError",
    "UnknownModelError",
    "VectorLengthMismatchError",
    "hash_content",
    "hash_skills",
    "MatchResult",
    "SkillMatch",
    "SkillSummary",
]
