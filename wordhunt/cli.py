"""CLI entrypoint for the word hunt puzzle generator."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List

from .core.constants import DEFAULT_GRID_SIZE, DEFAULT_MAX_ATTEMPTS, DEFAULT_MAX_WORDS
from .core.exceptions import WordHuntError
from .data.words import DEFAULT_WORDS, load_word_list, prepare_word_list
from .engine.generator import GeneratorConfig, PuzzleGenerator
from .engine.validator import PuzzleValidator
from .utils.logger import configure_logging
from .utils.pretty import pretty_print_puzzle


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate word hunt puzzles",
    )
    parser.add_argument("--size", type=int, default=DEFAULT_GRID_SIZE, help="Grid size in cells")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Words to hide (defaults to the built-in list)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="Text file with one word per line, or a CSV/TSV with a 'word' column",
    )
    parser.add_argument(
        "--max-words",
        type=int,
        default=DEFAULT_MAX_WORDS,
        help="Stop after this many words are placed",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help="Random placement attempts per word",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--solution", action="store_true", help="Show only the placed words' cells")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    raw_words: List[str] = []
    if args.words:
        raw_words.extend(args.words)
    try:
        if args.words_file:
            raw_words.extend(load_word_list(args.words_file))
        words = prepare_word_list(raw_words or DEFAULT_WORDS, max_length=args.size)
        config = GeneratorConfig(
            grid_size=args.size,
            max_words=args.max_words,
            max_attempts=args.max_attempts,
            seed=args.seed,
        )
        puzzle = PuzzleGenerator(config).generate(words)
    except WordHuntError as exc:
        parser.error(str(exc))

    validation = PuzzleValidator().validate(puzzle)
    if args.output:
        payload = puzzle.to_jsonable()
        payload["seed"] = args.seed
        payload["validation"] = validation.messages
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    else:
        label = f"Word hunt {puzzle.size}x{puzzle.size}, {len(puzzle.word_list)} words"
        if args.seed is not None:
            label += f" (seed {args.seed})"
        pretty_print_puzzle(puzzle, label=label, show_solution=args.solution)


if __name__ == "__main__":  # pragma: no cover
    main()
