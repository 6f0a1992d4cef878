"""CLI entrypoint for the daily neurology crossword generator."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict

from neurocross.core.constants import DEFAULT_GRID_SIZE, DEFAULT_MAX_SALTS, DEFAULT_MIN_WORDS, DEFAULT_TIMEZONE
from neurocross.core.exceptions import CrosswordError
from neurocross.data.neurology import default_bank
from neurocross.data.word_bank import load_word_bank
from neurocross.engine.generator import CrosswordGenerator, GeneratorConfig
from neurocross.engine.puzzle_store import DEFAULT_STORE_DIR, PuzzleStore
from neurocross.engine.validator import PuzzleValidator
from neurocross.utils.dates import daily_date_string, parse_date_string
from neurocross.utils.logger import configure_logging
from neurocross.utils.pretty import print_puzzle_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate the deterministic daily neurology crossword",
    )
    parser.add_argument(
        "--date",
        type=str,
        help="Puzzle date as YYYY-MM-DD (default: today in --timezone)",
    )
    parser.add_argument(
        "--timezone",
        type=str,
        default=DEFAULT_TIMEZONE,
        help="Time zone used to resolve today's date",
    )
    parser.add_argument(
        "--bank",
        type=str,
        metavar="PATH_OR_URL",
        help="Word bank file or http(s) URL (.tsv, .csv or ANSWER:Clue lines); default built-in",
    )
    parser.add_argument("--grid-size", type=int, default=DEFAULT_GRID_SIZE, help="Grid size in cells")
    parser.add_argument(
        "--min-words",
        type=int,
        default=DEFAULT_MIN_WORDS,
        help="Accept the first trial placing at least this many words",
    )
    parser.add_argument(
        "--max-salts",
        type=int,
        default=DEFAULT_MAX_SALTS,
        help="Maximum number of placement trials",
    )
    parser.add_argument(
        "--time-budget",
        type=float,
        default=None,
        help="Optional wall-clock budget in seconds for the trial loop",
    )
    parser.add_argument(
        "--bank-limit",
        type=int,
        default=None,
        help="Only draw from the first N bank entries",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--show", action="store_true", help="Print grid, clues and stats instead of JSON")
    parser.add_argument("--save", action="store_true", help="Persist the puzzle in the puzzle store")
    parser.add_argument(
        "--store-dir",
        type=Path,
        default=DEFAULT_STORE_DIR,
        help="Directory of the puzzle store",
    )
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
    configure_logging(args.log_level)

    if args.date:
        try:
            date_string = parse_date_string(args.date)
        except ValueError as exc:
            parser.error(str(exc))
    else:
        date_string = daily_date_string(tz_name=args.timezone)

    try:
        bank = load_word_bank(args.bank) if args.bank else default_bank()
    except CrosswordError as exc:
        parser.error(str(exc))

    try:
        config = GeneratorConfig(
            grid_size=args.grid_size,
            min_words=args.min_words,
            max_salts=args.max_salts,
            time_budget_seconds=args.time_budget,
            bank_limit=args.bank_limit,
        )
    except ValueError as exc:
        parser.error(str(exc))
    result = CrosswordGenerator(bank, config).generate(date_string)
    validation = PuzzleValidator().validate(result)

    if args.save:
        PuzzleStore(args.store_dir).save(result, date_string, config)

    if args.show:
        print_puzzle_stats(result, validation)
        return

    payload: Dict[str, Any] = {
        "date": date_string,
        **result.to_jsonable(),
        "validation": validation.messages,
    }
    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
