"""Crossword construction and solving for classroom worksheets.

This package exposes the public API surface via:

- ``edu_crossword.engine.generator.CrosswordGenerator``: builds a puzzle from
  word/clue entries.
- ``edu_crossword.engine.solver.InteractiveSolver``: solving state for a
  loaded puzzle.
- ``edu_crossword.data.normalization.normalize_entries``: cleans raw entries.
"""

from .core.exceptions import CrosswordError, UnplaceableWordsWarning, ValidationError
from .core.models import Puzzle, WordEntry
from .data.normalization import normalize_entries
from .engine.generator import CrosswordGenerator, CrosswordResult, GeneratorConfig, build_puzzle
from .engine.solver import InteractiveSolver

__all__ = [
    "CrosswordError",
    "CrosswordGenerator",
    "CrosswordResult",
    "GeneratorConfig",
    "InteractiveSolver",
    "Puzzle",
    "UnplaceableWordsWarning",
    "ValidationError",
    "WordEntry",
    "build_puzzle",
    "normalize_entries",
]

__version__ = "0.1.0"
