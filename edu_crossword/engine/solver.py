"""Interactive solving state for a loaded puzzle.

The solver keeps the player's answers, the selected cell and whether answers
are being checked. It never touches the puzzle itself; focus changes are
returned to the caller instead of being applied to any widget.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from ..core.constants import Direction, cell_key
from ..core.exceptions import InputLockedError
from ..core.models import Puzzle
from ..data.normalization import normalize_text
from ..utils.logger import get_logger
from .grid import GridModel


LOGGER = get_logger(__name__)


class CellStatus(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class Selection:
    row: int
    col: int
    direction: Direction


@dataclass
class SolverState:
    user_input: Dict[str, str] = field(default_factory=dict)
    selected: Optional[Selection] = None
    checking: bool = False


def next_cell_in_direction(
    row: int, col: int, direction: Direction, grid: GridModel
) -> Optional[Tuple[int, int]]:
    """Return the lettered cell after ``(row, col)`` along ``direction``, if any."""

    dr, dc = direction.step
    next_row, next_col = row + dr, col + dc
    if grid.is_filled(next_row, next_col):
        return next_row, next_col
    return None


class InteractiveSolver:
    """Selection, input, check, reveal and reset over one puzzle."""

    def __init__(self, puzzle: Puzzle) -> None:
        self.puzzle = puzzle
        self.state = SolverState()

    @property
    def grid(self) -> GridModel:
        return self.puzzle.grid

    def load(self, puzzle: Puzzle) -> None:
        """Switch to another puzzle, discarding all progress on the current one."""
        self.puzzle = puzzle
        self.state = SolverState()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def select(self, row: int, col: int) -> Optional[Selection]:
        cell = self.grid.cell(row, col)
        if cell is None:
            self.state.selected = None
            return None

        current = self.state.selected
        if current is not None and (current.row, current.col) == (row, col):
            other = current.direction.opposite
            if cell.participates(other):
                self.state.selected = Selection(row, col, other)
        else:
            direction = Direction.ACROSS if cell.participates(Direction.ACROSS) else Direction.DOWN
            self.state.selected = Selection(row, col, direction)
        return self.state.selected

    def input(self, row: int, col: int, char: str) -> Optional[Tuple[int, int]]:
        """Store a typed character and return the cell focus should move to.

        Raises:
            InputLockedError: answers are currently being checked.
        """

        if self.state.checking:
            raise InputLockedError("Cannot type while answers are being checked")
        if self.grid.cell(row, col) is None:
            return None

        value = normalize_text(char)[:1]
        self.state.user_input[cell_key(row, col)] = value
        selected = self.state.selected
        if not value or selected is None:
            return None

        target = next_cell_in_direction(row, col, selected.direction, self.grid)
        if target is not None:
            self.state.selected = Selection(target[0], target[1], selected.direction)
        return target

    def check(self) -> Dict[Tuple[int, int], CellStatus]:
        self.state.checking = True
        return self.statuses()

    def reveal(self) -> None:
        self.state.user_input = {
            cell_key(row, col): cell.letter for row, col, cell in self.grid.cells()
        }
        self.state.checking = False

    def reset(self) -> None:
        self.state.user_input = {}
        self.state.selected = None
        self.state.checking = False

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------
    def cell_status(self, row: int, col: int) -> CellStatus:
        cell = self.grid.cell(row, col)
        value = self.state.user_input.get(cell_key(row, col), "")
        if cell is None or not value:
            return CellStatus.NEUTRAL
        return CellStatus.CORRECT if value == cell.letter else CellStatus.INCORRECT

    def statuses(self) -> Dict[Tuple[int, int], CellStatus]:
        return {(row, col): self.cell_status(row, col) for row, col, _ in self.grid.cells()}

    @property
    def active_clue_number(self) -> Optional[int]:
        selected = self.state.selected
        if selected is None:
            return None
        cell = self.grid.cell(selected.row, selected.col)
        return cell.number_for(selected.direction) if cell is not None else None

    def is_in_active_word(self, row: int, col: int) -> bool:
        number = self.active_clue_number
        cell = self.grid.cell(row, col)
        if number is None or cell is None or self.state.selected is None:
            return False
        return cell.number_for(self.state.selected.direction) == number

    def is_complete(self) -> bool:
        return all(
            self.state.user_input.get(cell_key(row, col)) for row, col, _ in self.grid.cells()
        )

    def is_solved(self) -> bool:
        return all(
            self.state.user_input.get(cell_key(row, col)) == cell.letter
            for row, col, cell in self.grid.cells()
        )
