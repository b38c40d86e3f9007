"""Rich renderables for inspecting puzzle states.

Diagnostics only; the line encoding is the persistence format.  Tiles the
blank can swap with are highlighted, so a glance shows the legal moves.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidingpuzzle.models.direction import Direction
from slidingpuzzle.models.puzzle import PuzzleState

BLANK_STYLE = "dim"
MOVABLE_STYLE = "bold black on yellow"
TILE_STYLE = "bold white"


def movable_tiles(state: PuzzleState) -> dict[tuple[int, int], Direction]:
    """Map each tile next to the blank to the blank move that swaps it in."""
    br, bc = state.blank_pos
    tiles: dict[tuple[int, int], Direction] = {}
    for d in state.legal_directions():
        dr, dc = d.offset
        tiles[(br + dr, bc + dc)] = d
    return tiles


def render_board(state: PuzzleState) -> Table:
    """Return a Rich Table of the grid with row and column indices."""
    width = len(str(state.side * state.side - 1))
    movable = movable_tiles(state)
    moves = " ".join(d.value for d in movable.values()) or "none"

    table = Table(
        show_header=True,
        header_style="dim",
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
        caption=f"moves: {moves}",
        caption_style="dim",
    )
    table.add_column("", style="dim", justify="right")
    for c in range(state.side):
        table.add_column(str(c), width=width, justify="right")

    for r, row in enumerate(state.tiles):
        cells: list[Text] = [Text(str(r))]
        for c, val in enumerate(row):
            if val == 0:
                cells.append(Text("·".rjust(width), style=BLANK_STYLE))
            elif (r, c) in movable:
                cells.append(Text(f"{val:>{width}}", style=MOVABLE_STYLE))
            else:
                cells.append(Text(f"{val:>{width}}", style=TILE_STYLE))
        table.add_row(*cells)

    return table


def render_panel(state: PuzzleState) -> Panel:
    """The board table framed with its level, size and solved flag."""
    side = state.side
    solved = "  [green]solved[/green]" if state.is_solution() else ""
    return Panel(
        Align.center(render_board(state)),
        title=f"[bold cyan]Level {state.move_count}  {side}×{side}[/bold cyan]{solved}",
        border_style="bright_blue",
        padding=(1, 2),
    )


def print_board(state: PuzzleState, console: Console | None = None) -> None:
    (console or Console()).print(render_panel(state))
