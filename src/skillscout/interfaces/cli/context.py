"""Helpers to fetch shared state from the Typer context."""

import typer

from skillscout.modules.skills import load_skills
from skillscout.shared.config import Config
from skillscout.shared.types import SkillSummary
from .theme import print_error


def get_config(ctx: typer.Context) -> Config:
    """Config injected by the app callback, or a fresh one from the environment."""
    obj = ctx.obj if ctx is not None else None
    if isinstance(obj, Config):
        return obj
    return Config()


def override_config(config: Config, **overrides) -> Config:
    """Apply command-line overrides; exit with code 2 when they do not validate."""
    try:
        return config.with_overrides(**overrides)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=2)


def require_skills(config: Config) -> list[SkillSummary]:
    """Load skills from config.skills_dir; exit with code 1 when there are none."""
    skills = load_skills(config.skills_dir)
    if not skills:
        print_error(f"No skills found in {config.skills_dir}")
        raise typer.Exit(code=1)
    return skills


__all__ = ["get_config", "override_config", "require_skills"]
