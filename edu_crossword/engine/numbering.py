"""Clue numbering state for a single construction run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from ..core.constants import cell_key


@dataclass
class ClueNumberer:
    """Maps start cells to clue numbers, handing out new numbers in order.

    An across word and a down word that start on the same cell share one
    number.
    """

    locations: Dict[str, int] = field(default_factory=dict)
    next_number: int = 1

    def number_for(self, row: int, col: int) -> int:
        key = cell_key(row, col)
        number = self.locations.get(key)
        if number is None:
            number = self.next_number
            self.locations[key] = number
            self.next_number += 1
        return number

    def __contains__(self, key: str) -> bool:
        return key in self.locations
