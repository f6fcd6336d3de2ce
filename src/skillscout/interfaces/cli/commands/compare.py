"""Compare embedding models and strategies for one query."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import typer
from rich.markup import escape
from rich.table import Table

from skillscout.modules.embeddings import MODELS
from skillscout.modules.matching import SkillMatcher
from skillscout.shared.config import Config
from skillscout.shared.types import SkillMatch, SkillSummary
from ..context import get_config, override_config, require_skills
from ..theme import console, print_error


@dataclass
class ModelResult:
    model_name: str
    strategy: str
    matches: List[SkillMatch] = field(default_factory=list)
    latency_ms: float = 0.0
    error: Optional[str] = None


async def compare_model(
    config: Config,
    model_name: str,
    query: str,
    skills: Sequence[SkillSummary],
    top_k: int,
) -> ModelResult:
    """Load one model, rank skills, and time it. Errors are captured, not raised."""
    strategy = config.embedding_strategy
    started = time.perf_counter()
    try:
        matcher = SkillMatcher(
            config.with_overrides(embedding_model=model_name, match_strategy="semantic")
        )
        await matcher.embedding_service.wait_until_ready()
        ranked = await matcher.rank(query, skills)
        return ModelResult(
            model_name=model_name,
            strategy=strategy,
            matches=ranked[:top_k],
            latency_ms=(time.perf_counter() - started) * 1000,
        )
    except Exception as e:
        return ModelResult(
            model_name=model_name,
            strategy=strategy,
            latency_ms=(time.perf_counter() - started) * 1000,
            error=str(e),
        )


async def compare_models(
    config: Config,
    model_names: Sequence[str],
    query: str,
    skills: Sequence[SkillSummary],
    top_k: int,
) -> List[ModelResult]:
    # Sequential so latencies are not skewed by concurrent loads.
    results = []
    for name in model_names:
        results.append(await compare_model(config, name, query, skills, top_k))
    return results


def compare(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Query to compare models on", show_default=False),
    models: Optional[List[str]] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model to include (repeatable; default: all registered models)",
    ),
    embedding_strategy: str = typer.Option(
        "summary",
        "--embedding-strategy",
        "-e",
        help="summary or full",
    ),
    top: int = typer.Option(3, "--top", "-k", min=1, help="Matches shown per model"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Compare embedding models for one query."""
    config = override_config(get_config(ctx), embedding_strategy=embedding_strategy)
    model_names = models or list(MODELS)
    unknown = [m for m in model_names if m not in MODELS]
    if unknown:
        print_error(f"Unknown model(s): {', '.join(unknown)}. Available: {', '.join(MODELS)}")
        raise typer.Exit(code=2)

    skills = require_skills(config)
    results = asyncio.run(compare_models(config, model_names, query, skills, top))

    if json_output:
        console.print_json(
            data={
                "query": query,
                "results": [
                    {
                        "model": r.model_name,
                        "strategy": r.strategy,
                        "latency_ms": round(r.latency_ms, 1),
                        "error": r.error,
                        "matches": [m.model_dump() for m in r.matches],
                    }
                    for r in results
                ],
            }
        )
        return

    table = Table(title=f"Model comparison for '{query}' ({embedding_strategy})")
    table.add_column("Model", style="skill.name")
    table.add_column("Latency", justify="right")
    table.add_column("Top matches")
    for r in results:
        if r.error:
            table.add_row(r.model_name, f"{r.latency_ms:.0f} ms", f"[error]{escape(r.error)}[/error]")
            continue
        summary = ", ".join(f"{m.name} ({m.score:.3f})" for m in r.matches)
        table.add_row(r.model_name, f"{r.latency_ms:.0f} ms", summary)
    console.print(table)
