"""Persistent crossword document store.

Each saved crossword is a JSON document under ``local_db/crosswords/``
holding the classroom metadata, the entries that made it onto the grid, and
the grid and clues in the same shape the solver and export code read.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..core.constants import Direction
from ..core.exceptions import PuzzleNotFoundError
from ..core.models import ClueList, Puzzle, WordEntry
from ..io.clues import rewrite_clue
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .generator import CrosswordResult


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/crosswords")
DEFAULT_TOPIC = "Palavra Cruzada"


@dataclass
class SavedCrossword:
    id: str
    created_at: str
    curricular_component: str
    school_year: str
    topic: str
    puzzle: Puzzle
    word_entries: List[WordEntry] = field(default_factory=list)
    unplaced: List[str] = field(default_factory=list)

    def to_jsonable(self) -> Dict[str, Any]:
        doc = {
            "id": self.id,
            "created_at": self.created_at,
            "curricular_component": self.curricular_component,
            "school_year": self.school_year,
            "topic": self.topic,
            "word_entries": [{"word": e.word, "clue": e.clue} for e in self.word_entries],
            "unplaced": list(self.unplaced),
        }
        doc.update(self.puzzle.to_jsonable())
        return doc

    @classmethod
    def from_jsonable(cls, data: Dict[str, Any]) -> "SavedCrossword":
        return cls(
            id=data["id"],
            created_at=data.get("created_at", ""),
            curricular_component=data.get("curricular_component", ""),
            school_year=data.get("school_year", ""),
            topic=data.get("topic") or DEFAULT_TOPIC,
            puzzle=Puzzle.from_jsonable(data),
            word_entries=[WordEntry(e["word"], e["clue"]) for e in data.get("word_entries", [])],
            unplaced=list(data.get("unplaced", [])),
        )


class CrosswordStore:
    """Save, list, reload and delete crossword documents."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------
    def save(
        self,
        result: "CrosswordResult",
        curricular_component: str = "",
        school_year: str = "",
        topic: str = "",
    ) -> SavedCrossword:
        """Persist a construction result and return the stored document."""
        saved = SavedCrossword(
            id=self._new_id(),
            created_at=datetime.now(timezone.utc).isoformat(),
            curricular_component=curricular_component,
            school_year=school_year,
            topic=topic or DEFAULT_TOPIC,
            puzzle=result.puzzle,
            word_entries=[WordEntry(p.word, p.clue) for p in result.placed],
            unplaced=list(result.unplaced),
        )
        self._write(saved)
        LOGGER.info("Crossword saved: %s", saved.id)
        return saved

    def load(self, doc_id: str) -> SavedCrossword:
        path = self._path(doc_id)
        if not path.exists():
            raise PuzzleNotFoundError(f"No crossword with id {doc_id}")
        return SavedCrossword.from_jsonable(json.loads(path.read_text(encoding="utf-8")))

    def list_saved(self, search: Optional[str] = None) -> List[SavedCrossword]:
        """Return saved crosswords, newest first, optionally filtered by text."""
        term = (search or "").lower()
        documents = []
        for path in self.store_dir.glob("*.json"):
            saved = SavedCrossword.from_jsonable(json.loads(path.read_text(encoding="utf-8")))
            haystack = " ".join([saved.curricular_component, saved.school_year, saved.topic]).lower()
            if term and term not in haystack:
                continue
            documents.append(saved)
        documents.sort(key=lambda saved: saved.created_at, reverse=True)
        return documents

    def delete(self, doc_id: str) -> None:
        path = self._path(doc_id)
        if not path.exists():
            raise PuzzleNotFoundError(f"No crossword with id {doc_id}")
        path.unlink()
        LOGGER.info("Crossword deleted: %s", doc_id)

    def update_clues(self, doc_id: str, clues: ClueList) -> SavedCrossword:
        """Store edited clue texts; the grid is left untouched."""
        saved = self.load(doc_id)
        for direction in Direction:
            for edited in clues.for_direction(direction):
                rewrite_clue(saved.puzzle.clues, direction, edited.number, edited.clue)
        self._write(saved)
        LOGGER.info("Crossword clues updated: %s", doc_id)
        return saved

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    def _write(self, saved: SavedCrossword) -> None:
        self._path(saved.id).write_text(
            json.dumps(saved.to_jsonable(), ensure_ascii=False, indent=2), encoding="utf-8"
        )

    def _path(self, doc_id: str) -> Path:
        if not doc_id or "/" in doc_id or "\\" in doc_id or ".." in doc_id:
            raise PuzzleNotFoundError(f"Invalid crossword id {doc_id!r}")
        return self.store_dir / f"{doc_id}.json"

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        short_uuid = uuid.uuid4().hex[:8]
        return f"{ts}_{short_uuid}"
