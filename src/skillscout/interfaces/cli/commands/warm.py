"""Pre-compute skill embeddings into the on-disk cache."""

import asyncio

import typer
from rich.progress import Progress, SpinnerColumn, TextColumn

from skillscout.modules.embeddings import EmbeddingService
from skillscout.shared.errors import SkillScoutError
from ..context import get_config, override_config, require_skills
from ..theme import print_error, print_success, print_warning, stderr_console


async def _warm(service: EmbeddingService, skills) -> int:
    await service.wait_until_ready()
    return await service.precompute_skill_embeddings(skills)


def warm(
    ctx: typer.Context,
    model: str | None = typer.Option(None, "--model", "-m", help="Embedding model"),
    embedding_strategy: str | None = typer.Option(
        None,
        "--embedding-strategy",
        "-e",
        help="summary or full",
    ),
):
    """Embed every installed skill so the first match is fast."""
    config = get_config(ctx)
    overrides = {}
    if model:
        overrides["embedding_model"] = model
    if embedding_strategy:
        overrides["embedding_strategy"] = embedding_strategy
    if overrides:
        config = override_config(config, **overrides)

    skills = require_skills(config)
    try:
        service = EmbeddingService.from_config(config)
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=stderr_console,
            transient=True,
        ) as progress:
            progress.add_task(f"Embedding {len(skills)} skill(s)...", total=None)
            embedded = asyncio.run(_warm(service, skills))
    except (SkillScoutError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    message = f"Embedded {embedded}/{len(skills)} skills ({config.embedding_model}, {config.embedding_strategy})"
    if embedded < len(skills):
        print_warning(message)
        raise typer.Exit(code=1)
    print_success(message)
