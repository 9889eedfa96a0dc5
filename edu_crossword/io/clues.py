"""Clue text editing.

Edits only ever rewrite the text of existing clue entries; numbers, order
and the grid are left exactly as construction produced them.
"""

from __future__ import annotations

import copy
from typing import Optional

from ..core.constants import Direction
from ..core.models import Clue, ClueList
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def find_clue(clues: ClueList, direction: Direction, number: int) -> Clue:
    for clue in clues.for_direction(direction):
        if clue.number == number:
            return clue
    raise KeyError(f"No {direction.value} clue numbered {number}")


def rewrite_clue(clues: ClueList, direction: Direction, number: int, text: str) -> None:
    """Replace the text of one clue in place."""

    find_clue(clues, direction, number).clue = text


class ClueEditor:
    """Edit session over a puzzle's clues, applied only on commit."""

    def __init__(self, clues: ClueList) -> None:
        self._clues = clues
        self._draft: Optional[ClueList] = None

    @property
    def is_editing(self) -> bool:
        return self._draft is not None

    @property
    def draft(self) -> ClueList:
        if self._draft is None:
            raise RuntimeError("No clue edit in progress")
        return self._draft

    def start(self) -> ClueList:
        self._draft = copy.deepcopy(self._clues)
        return self._draft

    def change(self, direction: Direction, number: int, text: str) -> None:
        rewrite_clue(self.draft, direction, number, text)

    def cancel(self) -> None:
        self._draft = None

    def commit(self) -> ClueList:
        draft = self.draft
        for direction in Direction:
            for edited in draft.for_direction(direction):
                rewrite_clue(self._clues, direction, edited.number, edited.clue)
        self._draft = None
        LOGGER.info("Committed clue edits")
        return self._clues
