"""Command line front end for VeriNews using Typer and Rich."""

import asyncio
import json
import random
from pathlib import Path
from typing import Dict, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TaskID, TextColumn
from rich.table import Table

from verinews import __version__
from verinews.analysis import BandSampler, CredibilityAnalyzer
from verinews.config.logging import get_logger
from verinews.config.settings import settings
from verinews.config.vocabulary import ANALYSIS_STAGES
from verinews.errors import InvalidInputError
from verinews.pipeline import (
    AsyncioScheduler,
    InstantScheduler,
    PipelineController,
    StagePipeline,
    StageRun,
)
from verinews.schemas import AnalysisResult

app = typer.Typer(
    help="VeriNews - heuristic fake news detection",
    add_completion=False,
)

console = Console()

logger = get_logger("cli")


def _build_controller(seed: Optional[int], fast: bool) -> PipelineController:
    """Wire analyzer, pipeline and controller, pinning both random sources when seeded."""
    scoring_rng = random.Random(seed) if seed is not None else None
    timing_rng = random.Random(seed) if seed is not None else None
    pipeline = StagePipeline(
        analyzer=CredibilityAnalyzer(sampler=BandSampler(scoring_rng)),
        scheduler=InstantScheduler() if fast else AsyncioScheduler(),
        sampler=BandSampler(timing_rng),
    )
    return PipelineController(pipeline)


async def _run_analysis(
    controller: PipelineController,
    text: str,
    show_progress: bool,
) -> AnalysisResult:
    if not show_progress:
        return await controller.start_analysis(text)

    with Progress(
        TextColumn("{task.description}", style="cyan"),
        BarColumn(),
        TextColumn("{task.percentage:>3.0f}%"),
        console=console,
    ) as progress:
        task_ids: Dict[str, TaskID] = {
            name: progress.add_task(label, total=100) for name, label in ANALYSIS_STAGES
        }

        def render(stage_run: StageRun) -> None:
            for stage in stage_run.stages:
                progress.update(task_ids[stage.name], completed=stage.progress)

        return await controller.start_analysis(text, on_stage_update=render)


def _render_result(result: AnalysisResult) -> None:
    colour = "red" if result.is_fake else "green"
    console.print(Panel(
        f"[bold {colour}]{result.verdict.value}[/bold {colour}]\n"
        f"Confidence: {result.confidence:.1f}%  |  Suspicion: {result.suspicion_score:.2f}",
        title="Detection Result",
        border_style=colour,
    ))

    table = Table(title="Detailed Analysis", show_header=True, header_style="bold magenta")
    table.add_column("Factor", style="cyan", width=22)
    table.add_column("Score", style="yellow", justify="right")
    scores = result.sub_scores
    table.add_row("Sentiment", f"{scores.sentiment:.1f}%")
    table.add_row("Pattern analysis", f"{scores.pattern:.1f}%")
    table.add_row("Source credibility", f"{scores.source_credibility:.1f}%")
    table.add_row("Readability", f"{scores.readability:.1f}%")
    table.add_row("Emotional language", f"{scores.emotional_language:.1f}%")
    console.print(table)

    if result.keyword_flags:
        flags = result.keyword_flags[: settings.max_display_flags]
        console.print("[bold]Flagged keywords:[/bold] " + ", ".join(f"[orange3]{k}[/orange3]" for k in flags))

    for factor in result.risk_factors:
        console.print(f"[red]✗[/red] {factor}")
    for indicator in result.positive_indicators:
        console.print(f"[green]✓[/green] {indicator}")

    console.print(Panel(result.explanation, title="Analysis Explanation", border_style="blue"))


@app.command()
def analyze(
    text: Optional[str] = typer.Argument(None, help="Text to analyze"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, readable=True,
        help="Read the text from a file instead",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Pin the random source"),
    fast: bool = typer.Option(False, "--fast", help="Skip simulated stage delays"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """
    Analyze a news article or headline for credibility.

    Args:
        text: Text to analyze (or use --file)
        file: Path of a text file to analyze
        seed: Seed for reproducible confidence and sub-scores
        fast: Run stages without delays
        as_json: Emit JSON instead of rich output
    """
    if file is not None and text is not None:
        console.print("[red]✗[/red] Pass either TEXT or --file, not both")
        raise typer.Exit(2)
    if file is not None:
        text = file.read_text(encoding="utf-8")

    controller = _build_controller(seed if seed is not None else settings.random_seed, fast)

    try:
        result = asyncio.run(_run_analysis(controller, text or "", show_progress=not as_json))
    except InvalidInputError as e:
        console.print(f"[red]✗[/red] {e}")
        logger.warning("Rejected blank input")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        _render_result(result)


@app.command()
def stages() -> None:
    """List the analysis stages in execution order."""
    table = Table(title="Analysis Stages", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("Stage", style="cyan")
    table.add_column("Description", style="yellow")
    for index, (name, label) in enumerate(ANALYSIS_STAGES, start=1):
        table.add_row(str(index), name, label)
    console.print(table)


@app.command()
def status() -> None:
    """Display effective configuration."""
    table = Table(title="VeriNews Status", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan", width=22)
    table.add_column("Value", style="yellow")
    table.add_row("Version", __version__)
    table.add_row("Log level", settings.log_level)
    table.add_row("Log format", settings.log_format)
    table.add_row(
        "Stage duration",
        f"{settings.stage_min_duration:.2f}s - {settings.stage_max_duration:.2f}s",
    )
    table.add_row(
        "Progress step",
        f"{settings.progress_step_min}% - {settings.progress_step_max}%",
    )
    table.add_row("Random seed", str(settings.random_seed) if settings.random_seed is not None else "unpinned")
    console.print(table)


if __name__ == "__main__":
    app()
