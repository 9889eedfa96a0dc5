"""Worksheet projections for document export.

Both projections are read straight off the grid; numbering and placement are
never recomputed here.
"""

from __future__ import annotations

from typing import List, Optional

from ..core.models import Puzzle
from ..engine.grid import GridModel
from ..utils.pretty import bounding_box, format_clues

DEFAULT_TITLE = "Palavra Cruzada"
ANSWER_KEY_PREFIX = "Gabarito"

Projection = List[List[Optional[str]]]


def blank_projection(grid: GridModel) -> Projection:
    """Grid of clue numbers for the student sheet.

    Lettered cells render as the clue number string, or ``""`` when they
    carry none; empty cells stay ``None``.
    """

    return [
        [
            (str(cell.clue_number) if cell.clue_number is not None else "") if cell else None
            for cell in row
        ]
        for row in grid.rows()
    ]


def answer_key_projection(grid: GridModel) -> Projection:
    """Grid of uppercase letters for the answer key."""

    return [[cell.letter.upper() if cell else None for cell in row] for row in grid.rows()]


def render_projection(projection: Projection, grid: GridModel) -> str:
    """Render a projection cropped to the lettered area of ``grid``."""

    box = bounding_box(grid)
    if box is None:
        return ""
    top, left, bottom, right = box
    lines = []
    for r in range(top, bottom + 1):
        cells = []
        for c in range(left, right + 1):
            value = projection[r][c]
            cells.append("  ." if value is None else f"{value or '_':>3}")
        lines.append("".join(cells))
    return "\n".join(lines)


def render_document(puzzle: Puzzle, title: str = "") -> str:
    """Two-page plain-text worksheet: the puzzle, then the answer key."""

    title = title or DEFAULT_TITLE
    clues = format_clues(puzzle.clues)
    puzzle_page = "\n\n".join(
        [title, render_projection(blank_projection(puzzle.grid), puzzle.grid), clues]
    )
    answer_page = "\n\n".join(
        [
            f"{ANSWER_KEY_PREFIX} - {title}",
            render_projection(answer_key_projection(puzzle.grid), puzzle.grid),
            clues,
        ]
    )
    return puzzle_page + "\n\f\n" + answer_page
