"""Placement feasibility checks."""

from __future__ import annotations

from ..core.constants import Direction
from .grid import GridModel


def can_place(grid: GridModel, word: str, row: int, col: int, direction: Direction) -> bool:
    """Return whether ``word`` fits at ``(row, col)`` in ``direction``.

    The word must lie inside the grid, must not extend a longer run of
    letters at either end, may only cross filled cells holding the same
    letter, and may only touch other letters sideways where it crosses them.
    """

    length = len(word)
    dr, dc = direction.step
    end_row = row + dr * (length - 1)
    end_col = col + dc * (length - 1)
    if not (grid.contains(row, col) and grid.contains(end_row, end_col)):
        return False

    if grid.is_filled(row - dr, col - dc) or grid.is_filled(end_row + dr, end_col + dc):
        return False

    # Neighbours perpendicular to the word.
    pr, pc = dc, dr
    for i, letter in enumerate(word):
        r, c = row + dr * i, col + dc * i
        cell = grid.cell(r, c)
        if cell is not None:
            if cell.letter != letter:
                return False
        elif grid.is_filled(r - pr, c - pc) or grid.is_filled(r + pr, c + pc):
            return False
    return True


def intersection_count(grid: GridModel, word: str, row: int, col: int, direction: Direction) -> int:
    """Count how many of the word's cells are already filled."""

    dr, dc = direction.step
    return sum(1 for i in range(len(word)) if grid.is_filled(row + dr * i, col + dc * i))
