"""Rich rendering of generated grids for the terminal."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidequest.models.grid import CellKind, Direction, Grid

_CELL_STYLES: dict[CellKind, tuple[str, str]] = {
    CellKind.EMPTY: ("  ", ""),
    CellKind.OBSTACLE: ("██", "bright_blue"),
    CellKind.PATH: ("· ", "yellow"),
    CellKind.START: ("S ", "bold green"),
    CellKind.END: ("E ", "bold red"),
}

_ARROWS: dict[Direction, str] = {
    Direction.TOP: "↑",
    Direction.BOTTOM: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}


def render_grid(grid: Grid, show_path: bool = True) -> Table:
    """Return a Rich Table with one two-character column per cell."""
    table = Table(show_header=False, show_edge=False, box=None, padding=(0, 0))
    for _ in range(grid.width):
        table.add_column(width=2, no_wrap=True)

    for row in grid.cells:
        cells: list[Text] = []
        for cell in row:
            kind = cell.kind
            if kind == CellKind.PATH and not show_path:
                kind = CellKind.EMPTY
            glyph, style = _CELL_STYLES[kind]
            cells.append(Text(glyph, style=style))
        table.add_row(*cells)

    return table


def render_moves(moves: Sequence[Direction]) -> Text:
    text = Text()
    for i, move in enumerate(moves):
        if i:
            text.append(" ")
        text.append(_ARROWS[move], style="bold cyan")
    return text


def render_legend() -> Text:
    legend = Text()
    for kind, label in (
        (CellKind.START, "start"),
        (CellKind.END, "end"),
        (CellKind.OBSTACLE, "obstacle"),
        (CellKind.PATH, "solution"),
    ):
        glyph, style = _CELL_STYLES[kind]
        legend.append(glyph.strip(), style=style)
        legend.append(f" {label}   ", style="dim")
    return legend


def grid_panel(grid: Grid, show_path: bool = True) -> Panel:
    """Grid, legend and winning moves framed in a panel."""
    inner_w, inner_h = grid.width - 2, grid.height - 2

    stats = Text()
    stats.append("Seed: ", style="dim")
    stats.append(str(grid.seed), style="bold yellow")
    stats.append("    Moves: ", style="dim")
    stats.append(str(len(grid.moves_for_win)), style="bold yellow")
    stats.append("    Obstacles: ", style="dim")
    stats.append(str(grid.obstacle_count(interior_only=True)), style="bold yellow")

    body = Group(
        render_grid(grid, show_path=show_path),
        Text(""),
        stats,
        render_moves(grid.moves_for_win) if show_path else Text("", style="dim"),
        render_legend(),
    )
    return Panel(
        body,
        title=f"[bold cyan]SlideQuest  {inner_w}×{inner_h}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
        expand=False,
    )
