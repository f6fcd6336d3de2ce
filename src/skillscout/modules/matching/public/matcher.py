"""Skill matching: gate, scoring strategy, threshold and top-K in one decision.

1. No skills -> "No skills available"
2. Meta-conversation (when the gate is enabled) -> "Meta-conversation detected"
3. Score every skill with the active strategy (semantic or local)
4. Keep scores >= threshold, best first, unique names, at most top_k
"""

from __future__ import annotations

import asyncio
import sys
from functools import lru_cache
from typing import List, Optional, Sequence

from skillscout.modules.embeddings import EmbeddingService, cosine_similarity
from skillscout.shared.config import Config
from skillscout.shared.types import (
    REASON_LOCAL,
    REASON_META,
    REASON_NO_MATCH,
    REASON_NO_SKILLS,
    REASON_SEMANTIC,
    MatchResult,
    SkillMatch,
    SkillSummary,
)
from ..internal.gate import is_meta_conversation
from ..internal.lexical import LexicalIndexCache


class SkillMatcher:
    """
    Owns the embedding service (semantic strategy) and the lexical index memo
    (local strategy). Both are created lazily and can be injected for tests.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        embedding_service: Optional[EmbeddingService] = None,
        index_cache: Optional[LexicalIndexCache] = None,
    ):
        self.config = config or Config()
        self._embedding_service = embedding_service
        self.index_cache = index_cache or LexicalIndexCache()

    @property
    def strategy(self) -> str:
        return self.config.match_strategy

    @property
    def threshold(self) -> float:
        return self.config.threshold

    @property
    def embedding_service(self) -> EmbeddingService:
        if self._embedding_service is None:
            self._embedding_service = EmbeddingService.from_config(self.config)
        return self._embedding_service

    # --- Scoring ---
    async def _semantic_scores(
        self, message: str, skills: Sequence[SkillSummary]
    ) -> List[SkillMatch]:
        service = self.embedding_service
        query_embedding = await service.get_query_embedding(message)
        skill_embeddings = await asyncio.gather(
            *(service.get_skill_embedding(skill) for skill in skills)
        )
        return [
            SkillMatch(name=skill.name, score=cosine_similarity(query_embedding, embedding))
            for skill, embedding in zip(skills, skill_embeddings)
        ]

    def _local_scores(self, message: str, skills: Sequence[SkillSummary]) -> List[SkillMatch]:
        index = self.index_cache.get_or_build(skills)
        return [SkillMatch(name=doc.name, score=score) for doc, score in index.search(message)]

    async def rank(self, message: str, skills: Sequence[SkillSummary]) -> List[SkillMatch]:
        """All scored candidates, best first. Ties keep the input order."""
        if not skills:
            return []
        if self.strategy == "local":
            scores = self._local_scores(message, skills)
        else:
            scores = await self._semantic_scores(message, skills)
        # list.sort is stable, so equal scores keep input order.
        scores.sort(key=lambda m: m.score, reverse=True)
        return scores

    async def find_matches(
        self, message: str, skills: Sequence[SkillSummary]
    ) -> List[SkillMatch]:
        """Candidates with score >= threshold, unique by name, at most top_k."""
        threshold = self.threshold
        ranked = await self.rank(message, skills)
        if self.config.debug:
            print(
                "Skill match scores: "
                + ", ".join(f"{m.name}={m.score:.4f}" for m in ranked),
                file=sys.stderr,
            )

        matches: List[SkillMatch] = []
        seen: set[str] = set()
        for candidate in ranked:
            if candidate.score < threshold or candidate.name in seen:
                continue
            seen.add(candidate.name)
            matches.append(candidate)
            if len(matches) >= self.config.top_k:
                break
        return matches

    # --- Entry point ---
    async def match(self, user_message: str, available_skills: Sequence[SkillSummary]) -> MatchResult:
        if not available_skills:
            return MatchResult(matched=False, skills=[], reason=REASON_NO_SKILLS)

        if self.config.meta_gate and is_meta_conversation(user_message):
            return MatchResult(matched=False, skills=[], reason=REASON_META)

        matches = await self.find_matches(user_message, available_skills)
        if matches:
            reason = REASON_LOCAL if self.strategy == "local" else REASON_SEMANTIC
            return MatchResult(matched=True, skills=[m.name for m in matches], reason=reason)

        return MatchResult(matched=False, skills=[], reason=REASON_NO_MATCH)


@lru_cache(maxsize=4)
def default_matcher(config: Config) -> SkillMatcher:
    """One matcher per configuration, so the model loads once per process."""
    return SkillMatcher(config)


async def match_skills(
    user_message: str,
    available_skills: Sequence[SkillSummary],
    config: Optional[Config] = None,
    matcher: Optional[SkillMatcher] = None,
) -> MatchResult:
    """Host entry point: match a chat message against available skills.

    Hosts that manage their own lifecycle should pass ``matcher``; otherwise
    the shared matcher for ``config`` (default: environment) is used.
    """
    if matcher is None:
        matcher = default_matcher(config or Config())
    return await matcher.match(user_message, available_skills)


__all__ = ["SkillMatcher", "default_matcher", "match_skills"]
