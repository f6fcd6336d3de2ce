from .loader import NAME_PATTERN, load_skill, load_skills

__all__ = ["NAME_PATTERN", "load_skill", "load_skills"]
