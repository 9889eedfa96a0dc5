"""CLI entrypoint for the classroom crossword builder."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from edu_crossword.core.constants import GRID_SIZE
from edu_crossword.core.exceptions import ValidationError
from edu_crossword.core.models import WordEntry
from edu_crossword.engine.crossword_store import CrosswordStore
from edu_crossword.engine.generator import CrosswordGenerator, GeneratorConfig
from edu_crossword.io.export import render_document
from edu_crossword.io.gemini_client import GeminiAPIError
from edu_crossword.io.suggestions import (
    DEFAULT_WORD_COUNT,
    GeminiWordSuggester,
    UserWordListSuggester,
    merge_suggestions,
)
from edu_crossword.utils.logger import configure_logging, get_logger
from edu_crossword.utils.pretty import print_crossword_stats


LOGGER = get_logger("edu_crossword.cli")


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a classroom crossword from word/clue pairs",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD:CLUE",
        help="Word entries in WORD:Clue format",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--topic", type=str, default="", help="Crossword topic")
    parser.add_argument("--component", type=str, default="", help="Curricular component")
    parser.add_argument("--school-year", type=str, default="", help="School year")
    parser.add_argument(
        "--source-text",
        type=Path,
        metavar="FILE",
        help="Plain-text lesson material to draw Gemini keywords from (requires --llm)",
    )
    parser.add_argument(
        "--llm",
        action="store_true",
        help="Ask Gemini for words and clues (needs GEMINI_API_KEY)",
    )
    parser.add_argument(
        "--word-count",
        type=int,
        default=DEFAULT_WORD_COUNT,
        help="Number of words to request from Gemini",
    )
    parser.add_argument("--language", type=str, default="Portuguese", help="Language for Gemini words and clues")
    parser.add_argument("--grid-size", type=int, default=GRID_SIZE, help="Grid side length in cells")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--worksheet", type=Path, help="Optional path for the plain-text worksheet and answer key")
    parser.add_argument("--store-dir", type=Path, help="Save the crossword into this document store")
    parser.add_argument("--stats", action="store_true", help="Print the grid and construction stats")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_entries(args: argparse.Namespace, parser: argparse.ArgumentParser) -> List[WordEntry]:
    user_words: List[str] = []
    if args.words:
        user_words.extend(args.words)
    if args.words_file:
        user_words.extend(parse_words_file(args.words_file))

    primary = UserWordListSuggester(user_words) if user_words else None
    if not args.llm:
        return primary.suggest(args.topic) if primary else []

    gemini = GeminiWordSuggester(language=args.language)
    if args.source_text:
        text = args.source_text.read_text(encoding="utf-8")
        generated = gemini.suggest_from_text(text, args.component, args.school_year, args.word_count)
        existing = primary.suggest(args.topic) if primary else []
        return existing + generated
    if not args.topic:
        parser.error("--llm requires --topic or --source-text")
    return merge_suggestions(
        primary,
        [gemini],
        args.topic,
        len(user_words) + args.word_count,
        curricular_component=args.component,
        school_year=args.school_year,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if not (args.words or args.words_file or args.llm):
        parser.error("provide --words, --words-file or --llm")
    if args.source_text and not args.llm:
        parser.error("--source-text requires --llm")

    try:
        entries = collect_entries(args, parser)
    except (GeminiAPIError, RuntimeError) as exc:
        LOGGER.error("Cannot fetch words from Gemini: %s", exc)
        return 2

    generator = CrosswordGenerator(GeneratorConfig(grid_size=args.grid_size))
    try:
        result = generator.generate(entries)
    except ValidationError as exc:
        LOGGER.error("Cannot build crossword: %s", exc)
        return 2

    payload: Dict[str, Any] = {
        "topic": args.topic,
        "curricular_component": args.component,
        "school_year": args.school_year,
        "grid": result.grid.to_jsonable(),
        "clues": result.clues.to_jsonable(),
        "placed": [
            {
                "word": p.word,
                "clue": p.clue,
                "start": [p.row, p.col],
                "direction": p.direction.value,
            }
            for p in result.placed
        ],
        "unplaced": result.unplaced,
        "validation": result.validation_messages,
    }

    if args.store_dir:
        saved = CrosswordStore(args.store_dir).save(
            result,
            curricular_component=args.component,
            school_year=args.school_year,
            topic=args.topic,
        )
        payload["id"] = saved.id

    if args.worksheet:
        args.worksheet.write_text(render_document(result.puzzle, args.topic), encoding="utf-8")

    if args.stats:
        print_crossword_stats(result, stream=sys.stderr)

    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
