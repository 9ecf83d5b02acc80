"""
econ-quiz CLI - economics revision quiz in the terminal.

Usage:
    econ-quiz play                          # Pick a mode and level from the menu
    econ-quiz play --mode calculation -l 2  # Start a session directly
    econ-quiz modes                         # Question counts per mode and level
    econ-quiz progress                      # Show the last completed session
    econ-quiz validate-bank questions.json  # Check a question bank file
"""

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from ..config import Settings, get_settings
from ..delivery import ConsoleListener, prompt_asker, run_session
from ..delivery import visuals as ui
from ..quiz import (
    BankLoadError,
    JsonProgressStore,
    Mode,
    QuestionBank,
    SessionController,
)

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="econ-quiz",
    help="Economics revision quiz: diagrams, calculations, essays, case studies and flashcards",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log session transitions")
    ] = False,
) -> None:
    """Economics revision quiz."""
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)


def _load_bank(path: Path | None, settings: Settings) -> QuestionBank:
    path = path or settings.question_bank_path
    try:
        return QuestionBank.from_file(path) if path else QuestionBank.load_default()
    except BankLoadError as e:
        console.print(f"[red]✗ {escape(str(e))}[/]")
        raise typer.Exit(1)


def _make_rng(seed: int | None, settings: Settings) -> random.Random | None:
    seed = seed if seed is not None else settings.random_seed
    return random.Random(seed) if seed is not None else None


def _counts_table(bank: QuestionBank, levels: list[int]) -> Table:
    table = Table(title="Question Bank", header_style="bold")
    table.add_column("Mode", style="cyan")
    table.add_column("Name")
    for level in levels:
        table.add_column(f"L{level}", justify="right")
    table.add_column("Total", justify="right", style="bold")

    for mode in Mode:
        counts = bank.counts_by_level(mode)
        table.add_row(
            mode.value,
            mode.label,
            *(str(counts.get(level, 0)) for level in levels),
            str(sum(counts.values())),
        )
    return table


def _choose_mode_and_level(settings: Settings, store: JsonProgressStore) -> tuple[Mode, int]:
    """Menu: mode and difficulty level selection."""
    console.print(Panel(
        "[bold]IB Economics Revision[/bold]\nSelect a mode and difficulty level",
        border_style="blue",
    ))
    console.print(ui.render_progress_hint(store.get()))

    for mode in Mode:
        console.print(f"  [cyan]{mode.value:<12}[/cyan] {mode.label}")

    mode = Prompt.ask(
        "Mode",
        choices=[m.value for m in Mode],
        console=console,
    )
    level = IntPrompt.ask(
        "Difficulty level",
        choices=[str(lvl) for lvl in settings.levels],
        default=settings.default_level,
        console=console,
    )
    return Mode(mode), level


# =============================================================================
# Commands
# =============================================================================


@app.command()
def play(
    mode: Annotated[
        Mode | None, typer.Option("--mode", "-m", help="Question mode (menu when omitted)")
    ] = None,
    level: Annotated[
        int | None, typer.Option("--level", "-l", min=0, help="Difficulty level (includes lower levels)")
    ] = None,
    bank: Annotated[
        Path | None, typer.Option("--bank", "-b", help="Question bank JSON file")
    ] = None,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Seed for a reproducible question order")
    ] = None,
) -> None:
    """
    Play a revision session.

    Examples:
        econ-quiz play                    # Menu
        econ-quiz play -m flash           # Flashcards at the default level
        econ-quiz play -m case -l 3       # Case studies up to level 3
    """
    settings = get_settings()
    store = JsonProgressStore(settings.progress_path)
    question_bank = _load_bank(bank, settings)

    if mode is None:
        mode, level = _choose_mode_and_level(settings, store)
    if level is None:
        level = settings.default_level

    controller = SessionController(
        question_bank,
        store=store,
        listener=ConsoleListener(console, feedback_delay=settings.feedback_delay_seconds),
        rng=_make_rng(seed, settings),
    )

    console.print(Panel(
        f"[bold cyan]{mode.label.upper()}[/]\n"
        f"Difficulty level: {level}",
        border_style="cyan",
    ))

    try:
        report = run_session(controller, mode, level, prompt_asker(console))
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Session abandoned.[/]")
        raise typer.Exit(130)

    if report.attempted == 0:
        console.print("[yellow]No questions available for this mode.[/]")


@app.command()
def modes(
    bank: Annotated[
        Path | None, typer.Option("--bank", "-b", help="Question bank JSON file")
    ] = None,
) -> None:
    """Show question counts per mode and level."""
    settings = get_settings()
    question_bank = _load_bank(bank, settings)
    console.print(_counts_table(question_bank, settings.levels))


@app.command()
def progress() -> None:
    """Show the last completed session."""
    settings = get_settings()
    record = JsonProgressStore(settings.progress_path).get()
    console.print(ui.render_progress_hint(record))


@app.command("validate-bank")
def validate_bank(
    path: Annotated[Path, typer.Argument(help="Question bank JSON file")],
) -> None:
    """Validate a question bank file."""
    settings = get_settings()
    question_bank = _load_bank(path, settings)
    levels = sorted({q.level for m in Mode for q in question_bank.pool(m)} | set(settings.levels))
    console.print(_counts_table(question_bank, levels))

    if question_bank.rejected:
        console.print(f"[red]✗ {len(question_bank.rejected)} record(s) rejected:[/]")
        for entry in question_bank.rejected:
            console.print(f"  [red]- {escape(entry)}[/]")
        raise typer.Exit(1)

    console.print(f"[green]✓ {len(question_bank)} questions valid[/]")


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
