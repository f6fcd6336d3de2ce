"""Match a query against installed skills."""

import asyncio

import typer
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from skillscout.modules.matching import SkillMatcher
from skillscout.shared.errors import SkillScoutError
from ..context import get_config, override_config, require_skills
from ..theme import console, print_error, print_warning, stderr_console

MATCH_STRATEGIES = ("semantic", "local")


def match(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="User message to match", show_default=False),
    strategy: str | None = typer.Option(
        None,
        "--strategy",
        "-s",
        help="Match strategy: semantic (embeddings) or local (lexical index)",
    ),
    threshold: float | None = typer.Option(
        None,
        "--threshold",
        "-t",
        help="Override the threshold of the active strategy",
    ),
    top: int | None = typer.Option(None, "--top", "-k", min=1, help="Maximum matches"),
    no_gate: bool = typer.Option(
        False,
        "--no-gate",
        help="Do not skip meta-conversation turns",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON (for scripting/AI agents)",
    ),
):
    """Match a query against installed skills."""
    config = get_config(ctx)

    overrides = {}
    if strategy is not None:
        if strategy not in MATCH_STRATEGIES:
            print_error(f"Unknown strategy '{strategy}'. Use one of: {', '.join(MATCH_STRATEGIES)}")
            raise typer.Exit(code=2)
        overrides["match_strategy"] = strategy
    if top is not None:
        overrides["top_k"] = top
    if no_gate:
        overrides["meta_gate"] = False
    if overrides:
        config = override_config(config, **overrides)
    if threshold is not None:
        field = "local_threshold" if config.match_strategy == "local" else "semantic_threshold"
        config = override_config(config, **{field: threshold})

    skills = require_skills(config)
    matcher = SkillMatcher(config)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=stderr_console,
            transient=True,
        ) as progress:
            progress.add_task("Matching skills...", total=None)
            result = asyncio.run(matcher.match(query, skills))
    except SkillScoutError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if json_output:
        console.print_json(data=result.model_dump())
        return

    if not result.matched:
        print_warning(result.reason)
        return

    descriptions = {s.name: s.description for s in skills}
    console.print(f"[info]{result.reason}[/info] ({len(result.skills)} skill(s))")
    for name in result.skills:
        description = escape(descriptions.get(name, ""))
        console.print(f"  [skill.name]{name}[/skill.name]  [dim]{description}[/dim]")
