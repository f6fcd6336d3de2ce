"""Public API for the matching module."""

from .internal.gate import is_meta_conversation
from .internal.lexical import LexicalIndex, LexicalIndexCache, build_skill_index, query_skill_index
from .public.matcher import SkillMatcher, default_matcher, match_skills

__all__ = [
    "is_meta_conversation",
    "LexicalIndex",
    "LexicalIndexCache",
    "build_skill_index",
    "query_skill_index",
    "SkillMatcher",
    "default_matcher",
    "match_skills",
]
