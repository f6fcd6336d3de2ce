"""Load skill summaries from a skills directory.

Discovery proper belongs to the host; this loader exists so the CLI can run
the matcher against a directory of ``<skill>/SKILL.md`` files.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Iterator, List

from skillscout.shared.types import SkillSummary
from skillscout.shared.utils import normalize_whitespace, split_frontmatter

NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")


def _iter_skill_dirs(base: Path) -> Iterator[Path]:
    seen: set[Path] = set()
    for pattern in ("*/SKILL.md", "*/*/SKILL.md"):
        for skill_md in sorted(base.glob(pattern)):
            skill_dir = skill_md.parent
            if skill_dir in seen:
                continue
            seen.add(skill_dir)
            yield skill_dir


def load_skill(skill_dir: Path) -> SkillSummary | None:
    try:
        text = (skill_dir / "SKILL.md").read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        print(f"Skipping skill at {skill_dir}: SKILL.md is not UTF-8 ({e.reason})", file=sys.stderr)
        return None
    meta, _body = split_frontmatter(text)
    if not isinstance(meta, dict):
        print(
            f"Skipping skill '{skill_dir.name}' because frontmatter is not a mapping",
            file=sys.stderr,
        )
        return None

    name = str(meta.get("name") or skill_dir.name).strip()
    if not NAME_PATTERN.match(name):
        print(f"Skipping skill with invalid name '{name}' at {skill_dir}", file=sys.stderr)
        return None

    description = normalize_whitespace(meta.get("description") or "")
    return SkillSummary(
        name=name,
        description=description,
        content=text,
    )


def load_skills(skills_dir: Path) -> List[SkillSummary]:
    """Skill summaries under skills_dir (up to two levels deep), first name wins."""
    skills_dir = Path(skills_dir).expanduser()
    if not skills_dir.exists():
        print(f"Skills dir not found: {skills_dir}", file=sys.stderr)
        return []

    skills: List[SkillSummary] = []
    names_seen: set[str] = set()
    for skill_dir in _iter_skill_dirs(skills_dir):
        skill = load_skill(skill_dir)
        if skill is None:
            continue
        if skill.name in names_seen:
            print(f"Skipping duplicate skill name '{skill.name}' at {skill_dir}", file=sys.stderr)
            continue
        names_seen.add(skill.name)
        skills.append(skill)
    return skills


__all__ = ["load_skill", "load_skills", "NAME_PATTERN"]
