"""Custom exception hierarchy for crossword construction and solving."""

from __future__ import annotations

from typing import List, Sequence


class CrosswordError(Exception):
    """Base exception for crossword failures."""


class ValidationError(CrosswordError):
    """Raised when too few usable word entries remain to build a puzzle."""


class InputLockedError(CrosswordError):
    """Raised when typing into the grid while answers are being checked."""


class PuzzleNotFoundError(CrosswordError):
    """Raised when a stored crossword document does not exist."""


class UnplaceableWordsWarning(UserWarning):
    """Non-fatal report of words the placement pass could not fit."""

    def __init__(self, words: Sequence[str]) -> None:
        self.words: List[str] = list(words)
        super().__init__(f"could not fit: {', '.join(self.words)}")
