"""Greedy crossword construction.

The longest word is laid across the middle of the grid, then the remaining
words are fitted one at a time wherever they cross the most letters already
on the grid. The search is order-sensitive and never backtracks: each pass
scans the pending words from the end of the list, commits the first word
that fits, and starts over. Construction stops once a number of consecutive
passes equal to the pending count place nothing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple, Optional

from ..core.constants import GRID_SIZE, MAX_WORD_LENGTH, Direction
from ..core.exceptions import UnplaceableWordsWarning
from ..core.models import ClueList, Clue, PlacedWord, Puzzle, WordEntry
from ..data.normalization import RawEntry, normalize_entries
from ..utils.logger import get_logger
from .constraints import can_place, intersection_count
from .grid import GridModel
from .numbering import ClueNumberer
from .validator import GridValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    grid_size: int = GRID_SIZE
    validate: bool = True

    def __post_init__(self) -> None:
        if self.grid_size < MAX_WORD_LENGTH:
            raise ValueError(
                f"Grid size {self.grid_size} cannot hold a {MAX_WORD_LENGTH}-letter word"
            )


class Placement(NamedTuple):
    row: int
    col: int
    direction: Direction
    intersections: int


@dataclass
class CrosswordResult:
    puzzle: Puzzle
    placed: List[PlacedWord]
    unplaced: List[str]
    numbering: ClueNumberer
    passes: int = 0
    validation_messages: List[str] = field(default_factory=list)

    @property
    def grid(self) -> GridModel:
        return self.puzzle.grid

    @property
    def clues(self) -> ClueList:
        return self.puzzle.clues

    @property
    def warning(self) -> Optional[UnplaceableWordsWarning]:
        if not self.unplaced:
            return None
        return UnplaceableWordsWarning(self.unplaced)


class CrosswordGenerator:
    """Builds a puzzle from word/clue entries on a fixed-size grid."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        self.validator = GridValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, raw_entries: Iterable[RawEntry]) -> CrosswordResult:
        pending = normalize_entries(raw_entries)
        size = self.config.grid_size
        grid = GridModel(size)
        clues = ClueList()
        numbering = ClueNumberer()
        placed: List[PlacedWord] = []

        first = pending.pop(0)
        row = size // 2
        col = (size - len(first.word)) // 2
        LOGGER.info("Seeding grid with '%s' across at (%s,%s)", first.word, row, col)
        self._commit(grid, clues, numbering, placed, first, Placement(row, col, Direction.ACROSS, 0))

        attempts = 0
        passes = 0
        while pending and attempts < len(pending):
            passes += 1
            placed_in_pass = False
            for index in range(len(pending) - 1, -1, -1):
                entry = pending[index]
                best = self._best_fit(grid, entry.word, placed)
                if best is None:
                    continue
                self._commit(grid, clues, numbering, placed, entry, best)
                del pending[index]
                placed_in_pass = True
                attempts = 0
                break
            if not placed_in_pass:
                attempts += 1

        unplaced = [entry.word for entry in pending]
        if unplaced:
            LOGGER.warning("Could not fit %s word(s): %s", len(unplaced), ", ".join(unplaced))

        clues.sort()
        result = CrosswordResult(
            puzzle=Puzzle(grid=grid, clues=clues),
            placed=placed,
            unplaced=unplaced,
            numbering=numbering,
            passes=passes,
        )
        if self.config.validate:
            validation = self.validator.validate(grid, clues, placed)
            result.validation_messages = validation.messages
        LOGGER.info(
            "Crossword construction placed %s/%s words in %s passes",
            len(placed), len(placed) + len(unplaced), passes,
        )
        return result

    # ------------------------------------------------------------------
    # Candidate search
    # ------------------------------------------------------------------
    @staticmethod
    def _best_fit(grid: GridModel, word: str, placed: List[PlacedWord]) -> Optional[Placement]:
        """Return the crossing placement with the most intersections, if any.

        Only a strictly better count replaces the current best, so ties go
        to the first candidate found.
        """

        best: Optional[Placement] = None
        max_intersections = 0
        for j, letter in enumerate(word):
            for other in placed:
                for k, other_letter in enumerate(other.word):
                    if letter != other_letter:
                        continue
                    direction = other.direction.opposite
                    if direction == Direction.DOWN:
                        row, col = other.row - j, other.col + k
                    else:
                        row, col = other.row + k, other.col - j
                    if not can_place(grid, word, row, col, direction):
                        continue
                    intersections = intersection_count(grid, word, row, col, direction)
                    if intersections > max_intersections:
                        max_intersections = intersections
                        best = Placement(row, col, direction, intersections)
        return best

    @staticmethod
    def _commit(
        grid: GridModel,
        clues: ClueList,
        numbering: ClueNumberer,
        placed: List[PlacedWord],
        entry: WordEntry,
        placement: Placement,
    ) -> PlacedWord:
        word = PlacedWord(
            word=entry.word,
            clue=entry.clue,
            row=placement.row,
            col=placement.col,
            direction=placement.direction,
        )
        number = numbering.number_for(word.row, word.col)
        clues.for_direction(word.direction).append(Clue(number=number, clue=word.clue))
        grid.write_word(word, number)
        placed.append(word)
        LOGGER.debug(
            "Placed %s %s at (%s,%s) as %s (%s intersections)",
            word.word, word.direction.value, word.row, word.col, number, placement.intersections,
        )
        return word


def build_puzzle(raw_entries: Iterable[RawEntry], grid_size: int = GRID_SIZE) -> CrosswordResult:
    """Convenience wrapper around :class:`CrosswordGenerator`."""

    return CrosswordGenerator(GeneratorConfig(grid_size=grid_size)).generate(raw_entries)
