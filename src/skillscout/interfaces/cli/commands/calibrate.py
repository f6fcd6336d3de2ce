"""Pick a semantic threshold from labelled queries.

Each case is a query plus acceptable skill names. Positive cases should match
one of them; negative cases (conversational turns) should match nothing.

    [
      {"query": "help me write git commit messages", "expected": ["git-helper"], "category": "positive"},
      {"query": "ok", "expected": [], "category": "negative"}
    ]
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Literal, Sequence

import typer
from pydantic import Field, TypeAdapter, ValidationError
from rich.table import Table

from skillscout.modules.matching import SkillMatcher, is_meta_conversation
from skillscout.shared.errors import SkillScoutError
from skillscout.shared.types import FrozenModel, SkillSummary
from ..context import get_config, require_skills
from ..theme import console, print_error, print_success

DEFAULT_THRESHOLDS = "0.20,0.25,0.30,0.35,0.40"


class CalibrationCase(FrozenModel):
    query: str
    expected: List[str] = Field(default_factory=list)
    category: Literal["positive", "negative"]


@dataclass
class CaseOutcome:
    case: CalibrationCase
    top_match: str
    top_score: float
    gated: bool = False

    @property
    def correct_match(self) -> bool:
        return self.top_match in self.case.expected


@dataclass
class ThresholdResult:
    threshold: float
    true_positives: int
    false_positives: int
    true_negatives: int
    false_negatives: int

    @property
    def precision(self) -> float:
        predicted = self.true_positives + self.false_positives
        return self.true_positives / predicted if predicted else 0.0

    @property
    def recall(self) -> float:
        actual = self.true_positives + self.false_negatives
        return self.true_positives / actual if actual else 0.0

    @property
    def f1(self) -> float:
        p, r = self.precision, self.recall
        return 2 * p * r / (p + r) if (p + r) else 0.0

    @property
    def accuracy(self) -> float:
        total = (
            self.true_positives + self.false_positives + self.true_negatives + self.false_negatives
        )
        return (self.true_positives + self.true_negatives) / total if total else 0.0


def load_cases(path: Path) -> List[CalibrationCase]:
    data = json.loads(path.read_text(encoding="utf-8"))
    return TypeAdapter(List[CalibrationCase]).validate_python(data)


def parse_thresholds(value: str) -> List[float]:
    return [float(item) for item in value.split(",") if item.strip()]


def evaluate_thresholds(
    outcomes: Sequence[CaseOutcome], thresholds: Sequence[float]
) -> List[ThresholdResult]:
    results = []
    for threshold in thresholds:
        tp = fp = tn = fn = 0
        for outcome in outcomes:
            matched = not outcome.gated and outcome.top_score >= threshold
            if outcome.case.category == "positive":
                if matched and outcome.correct_match:
                    tp += 1
                else:
                    fn += 1
            elif matched:
                fp += 1
            else:
                tn += 1
        results.append(ThresholdResult(threshold, tp, fp, tn, fn))
    return results


async def score_cases(
    matcher: SkillMatcher,
    cases: Sequence[CalibrationCase],
    skills: Sequence[SkillSummary],
    use_gate: bool,
) -> List[CaseOutcome]:
    outcomes = []
    for case in cases:
        ranked = await matcher.rank(case.query, skills)
        top = ranked[0] if ranked else None
        outcomes.append(
            CaseOutcome(
                case=case,
                top_match=top.name if top else "",
                top_score=top.score if top else 0.0,
                gated=use_gate and is_meta_conversation(case.query),
            )
        )
    return outcomes


def calibrate(
    ctx: typer.Context,
    cases_file: Path = typer.Option(
        ...,
        "--cases",
        "-c",
        exists=True,
        dir_okay=False,
        help="JSON list of {query, expected, category}",
    ),
    thresholds: str = typer.Option(
        DEFAULT_THRESHOLDS,
        "--thresholds",
        help="Comma-separated thresholds to evaluate",
    ),
    gate: bool = typer.Option(
        False,
        "--gate/--no-gate",
        help="Count meta-conversation turns as unmatched before thresholding",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Evaluate precision/recall of semantic thresholds on labelled queries."""
    config = get_config(ctx).with_overrides(match_strategy="semantic")

    try:
        cases = load_cases(cases_file)
        threshold_values = parse_thresholds(thresholds)
    except (ValueError, ValidationError) as e:
        print_error(f"Invalid calibration input: {e}")
        raise typer.Exit(code=2)

    skills = require_skills(config)
    matcher = SkillMatcher(config)
    try:
        outcomes = asyncio.run(score_cases(matcher, cases, skills, gate))
    except SkillScoutError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    results = evaluate_thresholds(outcomes, threshold_values)
    best = max(results, key=lambda r: (r.f1, r.accuracy)) if results else None

    if json_output:
        console.print_json(
            data={
                "model": config.embedding_model,
                "cases": len(cases),
                "best_threshold": best.threshold if best else None,
                "results": [
                    {
                        "threshold": r.threshold,
                        "precision": round(r.precision, 4),
                        "recall": round(r.recall, 4),
                        "f1": round(r.f1, 4),
                        "accuracy": round(r.accuracy, 4),
                    }
                    for r in results
                ],
            }
        )
        return

    table = Table(title=f"Threshold calibration ({config.embedding_model}, {len(cases)} cases)")
    for column in ("Threshold", "TP", "FP", "TN", "FN", "Precision", "Recall", "F1", "Accuracy"):
        table.add_column(column, justify="right")
    for r in results:
        table.add_row(
            f"{r.threshold:.2f}",
            str(r.true_positives),
            str(r.false_positives),
            str(r.true_negatives),
            str(r.false_negatives),
            f"{r.precision:.1%}",
            f"{r.recall:.1%}",
            f"{r.f1:.1%}",
            f"{r.accuracy:.1%}",
        )
    console.print(table)
    if best:
        print_success(f"Best threshold by F1: {best.threshold:.2f}")
