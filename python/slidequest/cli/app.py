"""Command-line entry point: generate and solve puzzles."""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from slidequest.cli.render import grid_panel, render_moves
from slidequest.engine.gamegenerator import GenerationExhausted, GridGenerator
from slidequest.engine.gamesolver import Solver
from slidequest.models.difficulty import Difficulty, random_size
from slidequest.models.grid import Grid

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(add_completion=False, help="Sliding-block puzzle generator.")


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _resolve_size(
    width: Optional[int], height: Optional[int], difficulty: Difficulty, seed: Optional[int]
) -> tuple[int, int]:
    if width is not None and height is not None:
        return width, height
    drawn_w, drawn_h = random_size(difficulty, random.Random(seed))
    return width or drawn_w, height or drawn_h


# -- commands -----------------------------------------------------------------


@app.command()
def generate(
    width: Optional[int] = typer.Option(
        None, "-W", "--width", min=1,
        help="Interior width. Drawn from the difficulty limits when omitted.",
    ),
    height: Optional[int] = typer.Option(
        None, "-H", "--height", min=1,
        help="Interior height. Drawn from the difficulty limits when omitted.",
    ),
    difficulty: Difficulty = typer.Option(
        Difficulty.NORMAL, "-d", "--difficulty",
        help="Size tier used for missing dimensions.",
    ),
    seed: Optional[int] = typer.Option(
        None, "-s", "--seed",
        help="Seed for a reproducible grid.",
    ),
    as_json: bool = typer.Option(
        False, "--json",
        help="Print the grid as JSON instead of a drawing.",
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", dir_okay=False,
        help="Also write the grid JSON to this file.",
    ),
    hide_path: bool = typer.Option(
        False, "--hide-path",
        help="Do not reveal the solution in the drawing.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every generation attempt.",
    ),
) -> None:
    """Generate a uniquely solvable puzzle."""
    _configure_logging(verbose)
    w, h = _resolve_size(width, height, difficulty, seed)

    try:
        grid = GridGenerator.generate(w, h, seed)
    except GenerationExhausted as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1)

    data = grid.to_dict()
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(data, indent=2) + "\n")

    if as_json:
        typer.echo(json.dumps(data, indent=2))
    else:
        console.print(grid_panel(grid, show_path=not hide_path))


@app.command()
def solve(
    file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True,
        help="Grid JSON written by 'generate --output'.",
    ),
) -> None:
    """Solve a saved puzzle and check that its solution is unique."""
    try:
        grid = Grid.from_dict(json.loads(file.read_text()))
    except (json.JSONDecodeError, ValueError) as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1)

    moves = Solver.solve(grid)
    if not moves:
        console.print("[red]No solution.[/red]")
        raise typer.Exit(code=1)

    console.print(f"Shortest solution ({len(moves)} moves): ", render_moves(moves))
    if Solver.is_unique(grid):
        console.print("[green]Unique.[/green]")
    else:
        console.print("[yellow]Not unique.[/yellow]")
