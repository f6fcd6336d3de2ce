from .matcher import SkillMatcher, default_matcher, match_skills

__all__ = ["SkillMatcher", "default_matcher", "match_skills"]
