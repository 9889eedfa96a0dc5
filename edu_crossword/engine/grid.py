"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..core.constants import GRID_SIZE, Direction
from ..core.models import Cell, PlacedWord


class GridModel:
    """Fixed-size square grid stored as a flat ``row * size + col`` array."""

    def __init__(self, size: int = GRID_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self._cells: List[Optional[Cell]] = [None] * (size * size)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cell(self, row: int, col: int) -> Optional[Cell]:
        """Return the cell at ``(row, col)``; ``None`` when empty or out of bounds."""
        if not self.contains(row, col):
            return None
        return self._cells[row * self.size + col]

    def is_filled(self, row: int, col: int) -> bool:
        return self.cell(row, col) is not None

    def letter_at(self, row: int, col: int) -> Optional[str]:
        cell = self.cell(row, col)
        return cell.letter if cell is not None else None

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate ``(row, col, cell)`` over every lettered cell, row-major."""
        for index, cell in enumerate(self._cells):
            if cell is not None:
                yield index // self.size, index % self.size, cell

    def rows(self) -> List[List[Optional[Cell]]]:
        return [self._cells[r * self.size:(r + 1) * self.size] for r in range(self.size)]

    @property
    def filled_count(self) -> int:
        return sum(1 for cell in self._cells if cell is not None)

    def read_word(self, row: int, col: int, direction: Direction, length: int) -> str:
        """Read ``length`` letters starting at ``(row, col)``; empty cells read as ``?``."""
        dr, dc = direction.step
        return "".join(
            self.letter_at(row + dr * i, col + dc * i) or "?" for i in range(length)
        )

    # ------------------------------------------------------------------
    # Mutation (construction only)
    # ------------------------------------------------------------------
    def write_word(self, placed: PlacedWord, number: int) -> None:
        """Write a placed word's letters and tag every cell with ``number``."""

        for index, (row, col) in enumerate(placed.cells):
            slot = row * self.size + col
            cell = self._cells[slot]
            if cell is None:
                cell = Cell(letter=placed.word[index])
                self._cells[slot] = cell
            if placed.direction == Direction.ACROSS:
                cell.across = number
            else:
                cell.down = number
            if index == 0:
                cell.clue_number = number

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[Optional[Dict[str, Any]]]]:
        return [
            [cell.to_jsonable() if cell is not None else None for cell in row]
            for row in self.rows()
        ]

    @classmethod
    def from_jsonable(cls, rows: List[List[Optional[Dict[str, Any]]]]) -> "GridModel":
        size = len(rows)
        grid = cls(size)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"Grid row {r} has {len(row)} cells, expected {size}")
            for c, data in enumerate(row):
                if data:
                    grid._cells[r * size + c] = Cell.from_jsonable(data)
        return grid
