"""SkillScout: match user requests to agent skills without calling an LLM."""

from skillscout.modules.embeddings import EmbeddingService, cosine_similarity
from skillscout.modules.matching import (
    LexicalIndexCache,
    SkillMatcher,
    is_meta_conversation,
    match_skills,
)
from skillscout.shared.config import Config
from skillscout.shared.types import MatchResult, SkillMatch, SkillSummary

__version__ = "0.1.0"

__all__ = [
    "Config",
    "EmbeddingService",
    "LexicalIndexCache",
    "MatchResult",
    "SkillMatch",
    "SkillMatcher",
    "SkillSummary",
    "cosine_similarity",
    "is_meta_conversation",
    "match_skills",
    "__version__",
]
