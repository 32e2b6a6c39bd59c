"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output of the same
``SearchResult`` the vanilla frontend prints.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tilesolver.models.grid import Grid
from tilesolver.models.result import SearchResult

console = Console()


# -- grid rendering -----------------------------------------------------------


def _render_grid(grid: Grid, goal: Grid | None = None, title: str = "") -> Table:
    """Return a Rich Table for *grid*; tiles already at their goal cell are green."""
    width = len(str(grid.size * grid.size - 1))
    table = Table(
        title=title or None,
        title_style="dim",
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(grid.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(grid.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif goal is not None and goal.get_tile(r, c) == val:
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(result: SearchResult) -> Text:
    stats = Text()
    stats.append("  Generated: ", style="dim")
    stats.append(str(result.nodes_generated), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(result.nodes_expanded), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(f"{result.elapsed * 1000:.1f} ms", style="bold yellow")
    stats.append("    Heuristic: ", style="dim")
    stats.append(result.heuristic, style="bold cyan")
    return stats


# -- public entry point -------------------------------------------------------


def show_result(result: SearchResult, out: Console | None = None) -> None:
    """Render *result* as a panel of grids plus counters."""
    out = out or console

    if not result.solved:
        panel = Panel(
            Group(
                Align.center(Text("No solution exists for this instance.", style="bold red")),
                Text(""),
                Align.center(_stats(result)),
            ),
            title="[bold red]Unsolvable[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
        out.print()
        out.print(Align.center(panel))
        return

    goal = result.path[-1]
    moves = result.moves
    tables = [
        _render_grid(
            grid,
            goal,
            title="start" if i == 0 else f"{i}. {moves[i - 1].value}",
        )
        for i, grid in enumerate(result.path)
    ]

    panel = Panel(
        Group(
            Columns(tables, padding=(1, 2)),
            Text(""),
            Align.center(_stats(result)),
        ),
        title=f"[bold green]Solved in {result.cost} moves[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    out.print()
    out.print(panel)
