"""Print the similarity of every skill to a query."""

import asyncio

import typer
from rich.table import Table

from skillscout.modules.matching import SkillMatcher
from skillscout.shared.errors import SkillScoutError
from ..context import get_config, override_config, require_skills
from ..theme import console, print_error


def scores(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Query to score", show_default=False),
    model: str | None = typer.Option(None, "--model", "-m", help="Embedding model"),
    embedding_strategy: str | None = typer.Option(
        None,
        "--embedding-strategy",
        "-e",
        help="summary or full",
    ),
    top: int | None = typer.Option(None, "--top", "-k", min=1, help="Show only the best N"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Rank every skill by cosine similarity (no threshold, no gate)."""
    config = get_config(ctx)
    overrides = {"match_strategy": "semantic"}
    if model:
        overrides["embedding_model"] = model
    if embedding_strategy:
        overrides["embedding_strategy"] = embedding_strategy
    config = override_config(config, **overrides)

    skills = require_skills(config)
    matcher = SkillMatcher(config)
    try:
        ranked = asyncio.run(matcher.rank(query, skills))
    except (SkillScoutError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if top is not None:
        ranked = ranked[:top]

    if json_output:
        console.print_json(
            data={
                "query": query,
                "model": config.embedding_model,
                "threshold": config.semantic_threshold,
                "scores": [m.model_dump() for m in ranked],
            }
        )
        return

    table = Table(title=f"Scores for '{query}' ({config.embedding_model})")
    table.add_column("#", justify="right")
    table.add_column("Skill", style="skill.name")
    table.add_column("Score", justify="right", style="score")
    table.add_column("≥ threshold", justify="center")
    for rank, m in enumerate(ranked, 1):
        above = "✓" if m.score >= config.semantic_threshold else ""
        table.add_row(str(rank), m.name, f"{m.score:.4f}", above)
    console.print(table)
