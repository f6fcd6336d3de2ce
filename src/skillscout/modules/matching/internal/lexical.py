"""In-memory lexical index over skill names and descriptions.

BM25+ scoring per field with a name boost, plus prefix expansion for every
query term and typo-tolerant (edit distance) expansion for longer terms.
Scores are unscaled and not comparable with cosine similarities.
"""

from __future__ import annotations

import re
import sys
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from rank_bm25 import BM25Plus

from skillscout.shared.hashing import hash_skills
from skillscout.shared.types import SkillMatch, SkillSummary

FIELD_BOOSTS: Dict[str, float] = {"name": 2.0, "description": 1.0}

MIN_TERM_LENGTH = 3
# Short fuzzy terms produce too many false positives; they stay exact/prefix.
FUZZY_MIN_LENGTH = 5
FUZZY_RATIO = 0.2
MAX_FUZZY_DISTANCE = 6
PREFIX_WEIGHT = 0.375
FUZZY_WEIGHT = 0.45

BM25_K1 = 1.2
BM25_B = 0.7
BM25_DELTA = 0.5

# Words with in-word apostrophes stay whole so contractions can be dropped.
TOKEN_PATTERN = re.compile(r"[^\W_]+(?:'[^\W_]+)*", re.UNICODE)

CONTRACTIONS = frozenset(
    """
    i'm i've i'll i'd you're you've you'll you'd he's he'll he'd she's she'll she'd
    it's it'll it'd we're we've we'll we'd they're they've they'll they'd that's
    that'll there's there're here's what's who's where's when's why's how's let's
    isn't aren't wasn't weren't hasn't haven't hadn't doesn't don't didn't won't
    wouldn't shan't shouldn't can't cannot couldn't mustn't mightn't needn't ain't
    """.split()
)

STOPWORDS = frozenset(
    """
    a about above after again against all am an and any are as at be because been
    before being below between both but by could did do does doing down during each
    few for from further had has have having he her here hers herself him himself his
    how i if in into is it its itself just me more most my myself no nor not now of
    off on once only or other our ours ourselves out over own same she should so some
    such than that the their theirs them themselves then there these they this those
    through to too under until up very was we were what when where which while who
    whom why will with would you your yours yourself yourselves also can may might
    must shall please thanks thank want need like get got make let lets
    """.split()
) | CONTRACTIONS


def tokenize(text: str) -> List[str]:
    return TOKEN_PATTERN.findall(text.replace("’", "'"))


def process_term(term: str) -> Optional[str]:
    """Lowercase; drop stopwords, contractions and terms shorter than 3 chars."""
    term = term.lower()
    if len(term) < MIN_TERM_LENGTH or term in STOPWORDS:
        return None
    return term


def analyze(text: str) -> List[str]:
    terms = (process_term(token) for token in tokenize(text))
    return [t for t in terms if t]


def bounded_levenshtein(a: str, b: str, max_distance: int) -> Optional[int]:
    """Edit distance between a and b, or None when it exceeds max_distance."""
    if abs(len(a) - len(b)) > max_distance:
        return None
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i] + [0] * len(b)
        row_min = i
        for j, cb in enumerate(b, 1):
            current[j] = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + (ca != cb),  # substitution
            )
            row_min = min(row_min, current[j])
        if row_min > max_distance:
            return None
        previous = current
    distance = previous[-1]
    return distance if distance <= max_distance else None


def fuzzy_distance_for(term: str) -> int:
    if len(term) < FUZZY_MIN_LENGTH:
        return 0
    return min(MAX_FUZZY_DISTANCE, round(len(term) * FUZZY_RATIO))


@dataclass(frozen=True)
class LexicalDocument:
    id: str
    name: str
    description: str


class LexicalIndex:
    """One BM25+ scorer per field over the analyzed skill texts."""

    def __init__(self, documents: Sequence[LexicalDocument]):
        self.documents: List[LexicalDocument] = list(documents)
        self._fields: Dict[str, BM25Plus] = {}
        if not self.documents:
            return
        for field in FIELD_BOOSTS:
            corpus = [analyze(getattr(doc, field)) for doc in self.documents]
            self._fields[field] = BM25Plus(corpus, k1=BM25_K1, b=BM25_B, delta=BM25_DELTA)

    def __len__(self) -> int:
        return len(self.documents)

    def _expand(self, field: str, query_term: str) -> List[Tuple[str, float]]:
        """Indexed terms matched by query_term, with their weights."""
        vocabulary = self._fields[field].idf
        expansions: List[Tuple[str, float]] = []
        if query_term in vocabulary:
            expansions.append((query_term, 1.0))

        max_distance = fuzzy_distance_for(query_term)
        for term in vocabulary:
            if term == query_term:
                continue
            if term.startswith(query_term):
                distance = len(term) - len(query_term)
                expansions.append(
                    (term, PREFIX_WEIGHT * len(term) / (len(term) + 0.3 * distance))
                )
            elif max_distance:
                distance = bounded_levenshtein(query_term, term, max_distance)
                if distance is not None:
                    expansions.append(
                        (term, FUZZY_WEIGHT * len(query_term) / (len(query_term) + distance))
                    )
        return expansions

    def search(self, query: str) -> List[Tuple[LexicalDocument, float]]:
        """Score every document matching any query term, best first."""
        query_terms = list(dict.fromkeys(analyze(query)))
        if not query_terms or not self.documents:
            return []

        scores: Dict[int, float] = defaultdict(float)
        matched_terms: Dict[int, set] = defaultdict(set)

        for query_term in query_terms:
            for field, boost in FIELD_BOOSTS.items():
                bm25 = self._fields[field]
                for term, weight in self._expand(field, query_term):
                    # BM25+ gives every document the delta floor; only holders of the term count.
                    term_scores = bm25.get_scores([term])
                    for position, freqs in enumerate(bm25.doc_freqs):
                        if term not in freqs:
                            continue
                        scores[position] += weight * boost * float(term_scores[position])
                        matched_terms[position].add(query_term)

        # Documents matching more distinct query terms rank higher.
        ranked = [
            (position, score * len(matched_terms[position]))
            for position, score in scores.items()
        ]
        ranked.sort(key=lambda item: (-item[1], item[0]))
        return [(self.documents[position], score) for position, score in ranked]


def build_skill_index(skills: Iterable[SkillSummary]) -> LexicalIndex:
    documents: List[LexicalDocument] = []
    seen: set[str] = set()
    for skill in skills:
        if skill.name in seen:
            print(f"Skipping duplicate skill name '{skill.name}' in lexical index", file=sys.stderr)
            continue
        seen.add(skill.name)
        documents.append(
            LexicalDocument(id=skill.name, name=skill.name, description=skill.description)
        )
    return LexicalIndex(documents)


def query_skill_index(
    index: LexicalIndex, query: str, top_k: int, threshold: float
) -> List[SkillMatch]:
    """Matches with score >= threshold, best first, at most top_k."""
    matches = [
        SkillMatch(name=doc.name, score=score)
        for doc, score in index.search(query)
        if score >= threshold
    ]
    return matches[:top_k]


class LexicalIndexCache:
    """Memoizes one index keyed by the skill-list fingerprint.

    An identical list (same hash) returns the identical index object; any
    change, including reordering, builds and publishes a new one.
    """

    def __init__(self) -> None:
        self._entry: Optional[Tuple[str, LexicalIndex]] = None

    @property
    def fingerprint(self) -> Optional[str]:
        return self._entry[0] if self._entry else None

    def get_or_build(self, skills: Sequence[SkillSummary]) -> LexicalIndex:
        fingerprint = hash_skills(skills)
        entry = self._entry
        if entry is not None and entry[0] == fingerprint:
            return entry[1]
        index = build_skill_index(skills)
        self._entry = (fingerprint, index)
        return index

    def clear(self) -> None:
        self._entry = None


__all__ = [
    "FIELD_BOOSTS",
    "STOPWORDS",
    "LexicalDocument",
    "LexicalIndex",
    "LexicalIndexCache",
    "analyze",
    "bounded_levenshtein",
    "build_skill_index",
    "process_term",
    "query_skill_index",
    "tokenize",
]
