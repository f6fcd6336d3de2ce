import hashlib

from hypothesis import given, strategies as st

from skillscout.shared.hashing import hash_content, hash_skills
from skillscout.shared.types import SkillSummary


def test_hash_content_is_sha256_hex():
    assert hash_content("git-helper: Git workflow") == hashlib.sha256(
        "git-helper: Git workflow".encode("utf-8")
    ).hexdigest()


@given(st.text())
def test_hash_content_is_deterministic_64_hex(text):
    digest = hash_content(text)
    assert digest == hash_content(text)
    assert len(digest) == 64
    assert set(digest) <= set("0123456789abcdef")


def test_summary_and_full_text_get_different_keys():
    assert hash_content("pdf: PDF tools") != hash_content("---\nname: pdf\n---\n# PDF tools")


def test_hash_skills_matches_compact_json():
    skills = [SkillSummary(name="pdf", description="Résumé tools")]
    expected = hashlib.sha256(
        '[{"name":"pdf","description":"Résumé tools"}]'.encode("utf-8")
    ).hexdigest()
    assert hash_skills(skills) == expected


def test_hash_skills_is_order_sensitive():
    a = SkillSummary(name="a", description="first")
    b = SkillSummary(name="b", description="second")
    assert hash_skills([a, b]) != hash_skills([b, a])


def test_hash_skills_ignores_content():
    plain = SkillSummary(name="a", description="first")
    with_body = SkillSummary(name="a", description="first", content="# body")
    assert hash_skills([plain]) == hash_skills([with_body])
