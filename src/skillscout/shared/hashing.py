"""Content hashing for cache keys and skill-list fingerprints."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable

from .types import SkillSummary


def hash_content(text: str) -> str:
    """SHA-256 hex digest of the exact text (UTF-8)."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def hash_skills(skills: Iterable[SkillSummary]) -> str:
    """Order-sensitive fingerprint of name/description pairs."""
    payload = json.dumps(
        [{"name": s.name, "description": s.description} for s in skills],
        ensure_ascii=False,
        separators=(",", ":"),
    )
    return hash_content(payload)


__all__ = ["hash_content", "hash_skills"]
