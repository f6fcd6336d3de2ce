"""Public API for the skills module."""

from .public.loader import load_skill, load_skills

__all__ = ["load_skill", "load_skills"]
