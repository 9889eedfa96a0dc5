"""Deterministic integrity checks for constructed crosswords."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Sequence, Set, Tuple

from ..core.constants import Direction
from ..core.exceptions import CrosswordError
from ..core.models import ClueList, PlacedWord
from ..utils.logger import get_logger
from .grid import GridModel


LOGGER = get_logger(__name__)


class GridIntegrityError(CrosswordError):
    """Raised internally when a constructed grid breaks a structural rule."""


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over a finished grid."""

    def validate(
        self, grid: GridModel, clues: ClueList, placed: Sequence[PlacedWord]
    ) -> ValidationResult:
        try:
            self._check_round_trip(grid, placed)
            self._check_coverage(grid, placed)
            self._check_numbering(grid, clues)
            self._check_isolation(grid)
        except GridIntegrityError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_round_trip(self, grid: GridModel, placed: Sequence[PlacedWord]) -> None:
        for word in placed:
            read = grid.read_word(word.row, word.col, word.direction, word.length)
            if read != word.word:
                raise GridIntegrityError(
                    f"Word '{word.word}' at ({word.row},{word.col}) reads back as '{read}'"
                )

    def _check_coverage(self, grid: GridModel, placed: Sequence[PlacedWord]) -> None:
        covered: Set[Tuple[int, int]] = set()
        for word in placed:
            covered.update(word.cells)
        for row, col, cell in grid.cells():
            if (row, col) not in covered:
                raise GridIntegrityError(
                    f"Letter '{cell.letter}' at ({row},{col}) belongs to no word"
                )

    def _check_numbering(self, grid: GridModel, clues: ClueList) -> None:
        starts: Dict[int, List[Tuple[int, int]]] = defaultdict(list)
        for row, col, cell in grid.cells():
            if cell.clue_number is not None:
                starts[cell.clue_number].append((row, col))

        for direction in Direction:
            numbers = [clue.number for clue in clues.for_direction(direction)]
            if len(numbers) != len(set(numbers)):
                raise GridIntegrityError(f"Duplicate {direction.value} clue numbers: {numbers}")
            for number in numbers:
                locations = starts.get(number, [])
                if len(locations) != 1:
                    raise GridIntegrityError(
                        f"Clue {number} {direction.value} has {len(locations)} start cells"
                    )
                row, col = locations[0]
                cell = grid.cell(row, col)
                if cell is None or cell.number_for(direction) != number:
                    raise GridIntegrityError(
                        f"Start cell ({row},{col}) of clue {number} is not tagged {direction.value}"
                    )

    def _check_isolation(self, grid: GridModel) -> None:
        for row, col, cell in grid.cells():
            right = grid.cell(row, col + 1)
            if right is not None and (cell.across is None or cell.across != right.across):
                raise GridIntegrityError(
                    f"Cells ({row},{col}) and ({row},{col + 1}) touch outside a word"
                )
            below = grid.cell(row + 1, col)
            if below is not None and (cell.down is None or cell.down != below.down):
                raise GridIntegrityError(
                    f"Cells ({row},{col}) and ({row + 1},{col}) touch outside a word"
                )
