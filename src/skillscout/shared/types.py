from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

REASON_NO_SKILLS = "No skills available"
REASON_META = "Meta-conversation detected"
REASON_SEMANTIC = "Matched via semantic search"
REASON_LOCAL = "Matched via local search"
REASON_NO_MATCH = "No relevant skills found"

MatchReason = Literal[
    "No skills available",
    "Meta-conversation detected",
    "Matched via semantic search",
    "Matched via local search",
    "No relevant skills found",
]


class FrozenModel(BaseModel):
    """Immutable pydantic base for values passed between modules."""

    model_config = ConfigDict(frozen=True)


class SkillSummary(FrozenModel):
    """Skill as seen by the matcher (owned by the discovery layer)."""

    name: str = Field(..., description="Unique skill identifier (e.g., 'git-helper')")
    description: str = Field(default="", description="Brief skill description")
    content: str | None = Field(
        default=None,
        description="Full SKILL.md text, used by the 'full' embedding strategy",
    )


class SkillMatch(FrozenModel):
    name: str
    score: float


class MatchResult(FrozenModel):
    """Return value of match_skills."""

    matched: bool
    skills: list[str] = Field(default_factory=list, description="Names, best first")
    reason: MatchReason


__all__ = [
    "FrozenModel",
    "SkillSummary",
    "SkillMatch",
    "MatchResult",
    "MatchReason",
    "REASON_NO_SKILLS",
    "REASON_META",
    "REASON_SEMANTIC",
    "REASON_LOCAL",
    "REASON_NO_MATCH",
]
