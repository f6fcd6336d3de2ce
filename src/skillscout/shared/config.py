"""Shared configuration for SkillScout.

The Config class is immutable, validated via pydantic-settings, and designed
to be passed explicitly (no global singleton). Environment variables are
prefixed with SKILLSCOUT_ (e.g., SKILLSCOUT_EMBEDDING_MODEL).
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SKILLSCOUT_HOME = Path("~/.skillscout").expanduser()
CACHE_DIR_NAME = "skillscout"
DEFAULT_MODEL = "all-MiniLM-L6-v2"


def default_cache_dir() -> Path:
    """Base cache dir: $XDG_CACHE_HOME/skillscout, else ~/.cache/skillscout."""
    xdg_cache_home = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache_home:
        return Path(xdg_cache_home) / CACHE_DIR_NAME
    return Path.home() / ".cache" / CACHE_DIR_NAME


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="SKILLSCOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Paths
    skills_dir: Path = Field(
        default=SKILLSCOUT_HOME / "skills",
        description="Directory containing skill definitions (CLI only)",
    )
    cache_dir: Path | None = Field(
        default=None,
        description="Base cache directory (defaults to XDG cache home)",
    )

    # Embeddings
    embedding_model: str = Field(
        default=DEFAULT_MODEL,
        description="Sentence-embedding model from the registry",
    )
    embedding_strategy: Literal["summary", "full"] = Field(
        default="summary",
        description="summary embeds 'name: description', full embeds SKILL.md content",
    )

    # Matching
    match_strategy: Literal["semantic", "local"] = Field(
        default="semantic",
        description="semantic (embeddings + cosine) or local (lexical index)",
    )
    semantic_threshold: float = Field(
        default=0.30, ge=-1.0, le=1.0, description="Minimum cosine similarity"
    )
    local_threshold: float = Field(
        default=5.0, ge=0.0, description="Minimum lexical (BM25-style) score"
    )
    top_k: int = Field(default=5, ge=1, le=100, description="Maximum matched skills")
    meta_gate: bool = Field(
        default=True,
        description="Skip matching for meta-conversation turns (approvals, questions)",
    )
    debug: bool = Field(default=False, description="Print scored candidates to stderr")

    @field_validator("skills_dir", "cache_dir", mode="before")
    @classmethod
    def expand_path(cls, value: str | Path | None) -> Path | None:
        if value is None or value == "":
            return None
        return Path(value).expanduser().resolve()

    @field_validator("embedding_model")
    @classmethod
    def validate_model(cls, value: str) -> str:
        # Lazy import: the registry lives with the embeddings module.
        from skillscout.modules.embeddings.internal.models import get_model_config

        get_model_config(value)
        return value

    @property
    def threshold(self) -> float:
        """Threshold of the active match strategy."""
        if self.match_strategy == "local":
            return self.local_threshold
        return self.semantic_threshold

    def get_cache_dir(self) -> Path:
        return self.cache_dir or default_cache_dir()

    def with_overrides(self, **kwargs) -> "Config":
        """Create new Config with overrides (immutable pattern). Overrides are validated."""
        return self.model_validate({**self.model_dump(), **kwargs})


__all__ = ["Config", "SKILLSCOUT_HOME", "DEFAULT_MODEL", "default_cache_dir"]
