"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional, Tuple

from ..core.constants import Direction

if TYPE_CHECKING:
    from ..core.models import Cell, ClueList
    from ..engine.generator import CrosswordResult
    from ..engine.grid import GridModel


EMPTY_SYMBOL = "."
HIDDEN_SYMBOL = "_"


def bounding_box(grid: GridModel) -> Optional[Tuple[int, int, int, int]]:
    """Return ``(top, left, bottom, right)`` of the lettered area, inclusive."""

    rows = [r for r, _, _ in grid.cells()]
    cols = [c for _, c, _ in grid.cells()]
    if not rows:
        return None
    return min(rows), min(cols), max(rows), max(cols)


def cell_symbol(cell: Optional[Cell], show_letters: bool = True) -> str:
    if cell is None:
        return EMPTY_SYMBOL
    return cell.letter if show_letters else HIDDEN_SYMBOL


def format_grid(grid: GridModel, *, show_letters: bool = True, crop: bool = True) -> str:
    """Render the grid as text, optionally cropped to its lettered area."""

    box = bounding_box(grid) if crop else None
    if box is None:
        top, left, bottom, right = 0, 0, grid.size - 1, grid.size - 1
    else:
        top, left, bottom, right = box

    header_cells = [f"{c:>2}" for c in range(left, right + 1)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * len(header_cells) - 1))
    for r in range(top, bottom + 1):
        row_cells = [cell_symbol(grid.cell(r, c), show_letters) for c in range(left, right + 1)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_clues(clues: ClueList) -> str:
    lines: List[str] = []
    for direction, heading in ((Direction.ACROSS, "Across"), (Direction.DOWN, "Down")):
        lines.append(heading)
        for clue in clues.for_direction(direction):
            lines.append(f"  {clue.number}. {clue.clue}")
    return "\n".join(lines)


def print_crossword_stats(result: CrosswordResult, *, stream=None) -> None:
    """Print grid, clues and construction stats for a finished crossword."""

    stream = stream or sys.stdout
    grid = result.grid
    print(format_grid(grid), file=stream)
    print(file=stream)
    print(format_clues(result.clues), file=stream)

    lengths = [word.length for word in result.placed]
    crossings = sum(
        1 for _, _, cell in grid.cells() if cell.across is not None and cell.down is not None
    )

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(result.placed)}", file=stream)
    print(f"  Across / Down: {len(result.clues.across)} / {len(result.clues.down)}", file=stream)
    print(f"  Letters:       {grid.filled_count} ({crossings} crossings)", file=stream)
    if lengths:
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
    print(f"  Passes:        {result.passes}", file=stream)

    if result.unplaced:
        print(file=stream)
        print(f"Could not fit: {', '.join(result.unplaced)}", file=stream)

    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)
