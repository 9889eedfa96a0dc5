"""Word normalization and entry filtering."""

from __future__ import annotations

import unicodedata
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..core.constants import MAX_WORD_LENGTH, MIN_WORD_LENGTH
from ..core.exceptions import ValidationError
from ..core.models import WordEntry
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

RawEntry = Union[WordEntry, Tuple[str, str], Mapping[str, Any]]
FORBIDDEN_CHARACTERS = (" ", "-")


def normalize_text(text: Optional[str]) -> str:
    """Return ``text`` uppercased with its diacritics stripped."""

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.upper()


def is_valid_word(word: str) -> bool:
    """Check an already normalized word against the placement rules."""

    if not (MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH):
        return False
    return not any(char in word for char in FORBIDDEN_CHARACTERS)


def _unpack(raw: RawEntry) -> Tuple[str, str]:
    if isinstance(raw, WordEntry):
        return raw.word, raw.clue
    if isinstance(raw, Mapping):
        return raw.get("word") or "", raw.get("clue") or ""
    word, clue = raw
    return word or "", clue or ""


def clean_entry(raw: RawEntry) -> Optional[WordEntry]:
    """Normalize one entry, returning ``None`` when it must be dropped."""

    word, clue = _unpack(raw)
    word = normalize_text(word.strip())
    clue = clue.strip()
    if not clue or not is_valid_word(word):
        return None
    return WordEntry(word=word, clue=clue)


def normalize_entries(raw_entries: Iterable[RawEntry]) -> List[WordEntry]:
    """Clean, deduplicate and order word entries for placement.

    Malformed entries are dropped without error. When a word appears more
    than once the last clue wins. The surviving entries are returned longest
    first; entries of equal length keep their input order.

    Raises:
        ValidationError: fewer than two entries survive.
    """

    by_word: Dict[str, WordEntry] = {}
    dropped = 0
    for raw in raw_entries:
        entry = clean_entry(raw)
        if entry is None:
            dropped += 1
            continue
        by_word[entry.word] = entry

    if dropped:
        LOGGER.debug("Dropped %s malformed word entries", dropped)

    entries = sorted(by_word.values(), key=lambda entry: len(entry.word), reverse=True)
    if len(entries) < 2:
        raise ValidationError(
            f"fewer than 2 words: need at least 2 valid entries, got {len(entries)}"
        )
    return entries


__all__ = ["normalize_text", "is_valid_word", "clean_entry", "normalize_entries"]
