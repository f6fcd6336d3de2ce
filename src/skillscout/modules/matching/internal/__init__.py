from .gate import is_meta_conversation
from .lexical import (
    LexicalDocument,
    LexicalIndex,
    LexicalIndexCache,
    build_skill_index,
    query_skill_index,
)

__all__ = [
    "is_meta_conversation",
    "LexicalDocument",
    "LexicalIndex",
    "LexicalIndexCache",
    "build_skill_index",
    "query_skill_index",
]
