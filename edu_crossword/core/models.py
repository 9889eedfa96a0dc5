"""Data models supporting the crossword engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .constants import Direction

if TYPE_CHECKING:
    from ..engine.grid import GridModel


@dataclass
class WordEntry:
    """A word and the clue that describes it."""

    word: str
    clue: str


@dataclass
class PlacedWord:
    """A word bound to a start cell and a direction."""

    word: str
    clue: str
    row: int
    col: int
    direction: Direction

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(self.length)]


@dataclass
class Cell:
    """A lettered grid cell with its numbering metadata."""

    letter: str
    clue_number: Optional[int] = None
    across: Optional[int] = None
    down: Optional[int] = None

    def number_for(self, direction: Direction) -> Optional[int]:
        return self.across if direction == Direction.ACROSS else self.down

    def participates(self, direction: Direction) -> bool:
        return self.number_for(direction) is not None

    def to_jsonable(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"letter": self.letter}
        if self.clue_number is not None:
            data["clueNumber"] = self.clue_number
        if self.across is not None:
            data["across"] = self.across
        if self.down is not None:
            data["down"] = self.down
        return data

    @classmethod
    def from_jsonable(cls, data: Dict[str, Any]) -> "Cell":
        return cls(
            letter=data["letter"],
            clue_number=data.get("clueNumber"),
            across=data.get("across"),
            down=data.get("down"),
        )


@dataclass
class Clue:
    """A numbered clue entry."""

    number: int
    clue: str


@dataclass
class ClueList:
    """Across and down clue entries."""

    across: List[Clue] = field(default_factory=list)
    down: List[Clue] = field(default_factory=list)

    def for_direction(self, direction: Direction) -> List[Clue]:
        return self.across if direction == Direction.ACROSS else self.down

    def sort(self) -> None:
        self.across.sort(key=lambda clue: clue.number)
        self.down.sort(key=lambda clue: clue.number)

    def to_jsonable(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "across": [{"number": c.number, "clue": c.clue} for c in self.across],
            "down": [{"number": c.number, "clue": c.clue} for c in self.down],
        }

    @classmethod
    def from_jsonable(cls, data: Dict[str, Any]) -> "ClueList":
        return cls(
            across=[Clue(int(c["number"]), c["clue"]) for c in data.get("across", [])],
            down=[Clue(int(c["number"]), c["clue"]) for c in data.get("down", [])],
        )


@dataclass
class Puzzle:
    """A finished grid together with its clue lists."""

    grid: "GridModel"
    clues: ClueList

    def to_jsonable(self) -> Dict[str, Any]:
        return {"grid": self.grid.to_jsonable(), "clues": self.clues.to_jsonable()}

    @classmethod
    def from_jsonable(cls, data: Dict[str, Any]) -> "Puzzle":
        from ..engine.grid import GridModel

        return cls(
            grid=GridModel.from_jsonable(data["grid"]),
            clues=ClueList.from_jsonable(data["clues"]),
        )
