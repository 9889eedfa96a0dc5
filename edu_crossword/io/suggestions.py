"""Word and clue suggestion providers.

Providers only produce candidate entries; the engine filters and orders them
again before placement, so a provider may return malformed words.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, Sequence

from ..core.constants import MAX_WORD_LENGTH
from ..core.models import WordEntry
from ..data.normalization import is_valid_word, normalize_text
from ..utils.logger import get_logger
from .gemini_client import GeminiClient


LOGGER = get_logger(__name__)

DEFAULT_WORD_COUNT = 10
MAX_SOURCE_CHARACTERS = 8000


class WordSuggester(Protocol):
    """Protocol implemented by all word suggestion providers."""

    def suggest(
        self,
        topic: str,
        curricular_component: str = "",
        school_year: str = "",
        count: int = DEFAULT_WORD_COUNT,
    ) -> List[WordEntry]:
        ...


def filter_suggestions(entries: Sequence[WordEntry], count: int) -> List[WordEntry]:
    """Normalize suggested words, drop unusable ones and keep the first ``count``."""

    valid: List[WordEntry] = []
    for entry in entries:
        word = normalize_text(entry.word.strip())
        clue = entry.clue.strip()
        if not clue or not is_valid_word(word):
            LOGGER.debug("Discarding suggestion %r", entry.word)
            continue
        valid.append(WordEntry(word=word, clue=clue))
    return valid[:count]


class GeminiWordSuggester:
    """Suggests crossword words and clues with the Gemini API."""

    TOPIC_PROMPT = (
        "Generate a list of {count} words (at most {max_length} letters, no spaces "
        "or hyphens) and their clues for a crossword puzzle. "
        "Words must be uppercase. Write words and clues in {language}.\n"
        "- Topic: {topic}\n"
        "- Curricular component: {component}\n"
        "- School year: {year}"
    )

    TEXT_PROMPT = (
        "Based on the text below, generate a list of {count} keywords (at most "
        "{max_length} letters, no spaces or hyphens) and their clues for a "
        "crossword puzzle. Words must be uppercase. Write words and clues in {language}.\n"
        "- Curricular component: {component}\n"
        "- School year: {year}\n"
        "---\n"
        "{text}\n"
        "---"
    )

    def __init__(
        self,
        gemini_client: GeminiClient | None = None,
        language: str = "Portuguese",
    ) -> None:
        self._client = gemini_client
        self.language = language

    @staticmethod
    def response_schema(count: int) -> Dict[str, Any]:
        return {
            "type": "ARRAY",
            "description": f"List of {count} crossword words and their clues.",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "word": {
                        "type": "STRING",
                        "description": (
                            f"The word, at most {MAX_WORD_LENGTH} letters, "
                            "uppercase, without spaces or hyphens."
                        ),
                    },
                    "clue": {"type": "STRING", "description": "The clue for the word."},
                },
                "required": ["word", "clue"],
            },
        }

    def suggest(
        self,
        topic: str,
        curricular_component: str = "",
        school_year: str = "",
        count: int = DEFAULT_WORD_COUNT,
    ) -> List[WordEntry]:
        count = count if count > 0 else DEFAULT_WORD_COUNT
        prompt = self.TOPIC_PROMPT.format(
            count=count,
            max_length=MAX_WORD_LENGTH,
            language=self.language,
            topic=topic,
            component=curricular_component,
            year=school_year,
        )
        return self._request(prompt, count)

    def suggest_from_text(
        self,
        text: str,
        curricular_component: str = "",
        school_year: str = "",
        count: int = DEFAULT_WORD_COUNT,
    ) -> List[WordEntry]:
        if not text.strip():
            raise ValueError("Source text is empty")
        count = count if count > 0 else DEFAULT_WORD_COUNT
        prompt = self.TEXT_PROMPT.format(
            count=count,
            max_length=MAX_WORD_LENGTH,
            language=self.language,
            component=curricular_component,
            year=school_year,
            text=text[:MAX_SOURCE_CHARACTERS],
        )
        return self._request(prompt, count)

    def _request(self, prompt: str, count: int) -> List[WordEntry]:
        client = self._client or GeminiClient()
        self._client = client
        data = client.generate_json(prompt, self.response_schema(count))
        entries = self._parse_response(data)
        suggestions = filter_suggestions(entries, count)
        LOGGER.info("Gemini suggested %s usable words (%s raw)", len(suggestions), len(entries))
        return suggestions

    @staticmethod
    def _parse_response(data: Any) -> List[WordEntry]:
        if isinstance(data, dict):
            data = data.get("words", [])
        if not isinstance(data, list):
            LOGGER.warning("Gemini word payload is not a list; ignoring it")
            return []
        entries: List[WordEntry] = []
        for item in data:
            if not isinstance(item, dict):
                continue
            word = item.get("word")
            clue = item.get("clue")
            if isinstance(word, str) and isinstance(clue, str):
                entries.append(WordEntry(word=word, clue=clue))
        return entries


class UserWordListSuggester:
    """Returns a user-supplied ``WORD:Clue`` list as word entries."""

    def __init__(self, raw_words: Sequence[str]) -> None:
        self._entries: List[WordEntry] = []
        for item in raw_words:
            item = item.strip()
            if not item:
                continue
            word, _, clue = item.partition(":")
            self._entries.append(WordEntry(word.strip(), clue.strip()))

    def suggest(
        self,
        topic: str = "",
        curricular_component: str = "",
        school_year: str = "",
        count: int = DEFAULT_WORD_COUNT,
    ) -> List[WordEntry]:
        return list(self._entries)


def merge_suggestions(
    primary: Optional[WordSuggester],
    fallbacks: Sequence[WordSuggester],
    topic: str,
    count: int,
    curricular_component: str = "",
    school_year: str = "",
) -> List[WordEntry]:
    """Collect entries from the primary provider, topping up from fallbacks.

    Later providers never override a word an earlier provider already gave.
    """

    collected: List[WordEntry] = []
    seen: set[str] = set()

    def extend(entries: Sequence[WordEntry]) -> None:
        for entry in entries:
            key = normalize_text(entry.word.strip())
            if not key or key in seen:
                continue
            collected.append(entry)
            seen.add(key)

    providers = ([primary] if primary else []) + list(fallbacks)
    for index, provider in enumerate(providers):
        if index > 0 and len(collected) >= count:
            break
        try:
            extend(provider.suggest(topic, curricular_component, school_year, count))
        except Exception as exc:
            LOGGER.warning("Word suggester %s failed: %s", provider, exc)
    return collected
