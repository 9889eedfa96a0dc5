"""Shared constants and enumerations for the crossword engine."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


GRID_SIZE = 30
MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 15


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def opposite(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


def cell_key(row: int, col: int) -> str:
    """Return the ``"row-col"`` key used by numbering maps and solver input."""
    return f"{row}-{col}"
