"""Typer-based CLI entry point.

SkillScout CLI matches user messages against installed skills:
- match: Decide which skills apply to a message
- scores: Show the similarity of every skill to a message
- compare: Compare embedding models on one message
- calibrate: Evaluate thresholds on labelled queries
- warm: Pre-compute skill embeddings into the cache
"""

from pathlib import Path
from typing import Optional

import typer

from skillscout.shared.config import Config
from .commands.calibrate import calibrate
from .commands.compare import compare
from .commands.match import match
from .commands.scores import scores
from .commands.warm import warm
from .theme import VERSION, console, print_error


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"skillscout [info]{VERSION}[/info]")
        raise typer.Exit()


app = typer.Typer(
    name="skillscout",
    help="[bold]SkillScout[/bold] - Find the right skill for every message\n\n"
         "Matches user messages to agent skills with local sentence embeddings,\n"
         "or with a lexical index when no model is wanted.",
    rich_markup_mode="rich",
    no_args_is_help=True,
    add_completion=True,
    pretty_exceptions_show_locals=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    skills_dir: Optional[Path] = typer.Option(
        None,
        "--skills-dir",
        help="Override skills directory (CLI > env > default)",
    ),
    cache_dir: Optional[Path] = typer.Option(
        None,
        "--cache-dir",
        help="Override embedding cache directory (CLI > env > default)",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        help="Embedding model (CLI > env > default)",
    ),
):
    """SkillScout - Find the right skill for every message."""
    # Build base config and apply CLI overrides (CLI > env > default)
    overrides = {}
    if skills_dir:
        overrides["skills_dir"] = skills_dir.expanduser().resolve()
    if cache_dir:
        overrides["cache_dir"] = cache_dir.expanduser().resolve()
    if model:
        overrides["embedding_model"] = model

    try:
        config = Config(**overrides)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=2)
    ctx.obj = config


# Register commands with enhanced help
app.command(
    "match",
    help="Match a message against installed skills.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  skillscout match 'Help me create a new branch'\n\n"
         "  skillscout match 'extract tables from this PDF' --top 3\n\n"
         "  skillscout match 'write unit tests' --strategy local --json",
)(match)

app.command(
    "scores",
    help="Show the similarity of every skill to a message.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  skillscout scores 'Help me create a new branch'\n\n"
         "  skillscout scores 'review my code' -m all-mpnet-base-v2 -e full",
)(scores)

app.command(
    "compare",
    help="Compare embedding models on one message.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  skillscout compare 'convert this doc to PDF'\n\n"
         "  skillscout compare 'fix the failing test' -m all-MiniLM-L6-v2 -m bge-small-en-v1.5",
)(compare)

app.command(
    "calibrate",
    help="Evaluate semantic thresholds on labelled queries.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  skillscout calibrate --cases cases.json\n\n"
         "  skillscout calibrate --cases cases.json --thresholds 0.25,0.3,0.35 --gate",
)(calibrate)

app.command(
    "warm",
    help="Pre-compute skill embeddings into the cache.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  skillscout warm\n\n"
         "  skillscout warm --model bge-small-en-v1.5 --embedding-strategy full",
)(warm)


def run():
    """Entry point for CLI."""
    app()
