"""Word bank loading from local files or HTTP URLs.

Supported layouts, chosen by the file (or URL path) suffix:

- ``.tsv`` / ``.csv``: ``answer`` and ``clue`` columns, optional header row.
- anything else: one ``ANSWER:Clue`` entry per line, ``#`` comments and
  blank lines ignored.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable, List, Sequence
from urllib.parse import urlparse

import requests

from ..core.exceptions import WordBankLoadError
from ..core.models import WordEntry
from ..utils.logger import get_logger
from .normalization import clean_answer


LOGGER = get_logger(__name__)

HEADER_NAMES = ("answer", "clue")


def is_url(source: str | Path) -> bool:
    return isinstance(source, str) and urlparse(source).scheme in {"http", "https"}


def load_word_bank(source: str | Path, timeout_seconds: float = 30.0) -> List[WordEntry]:
    """Read and sanitize the bank at ``source`` (path or ``http(s)://`` URL)."""

    if is_url(source):
        text = fetch_text(str(source), timeout_seconds=timeout_seconds)
        suffix = Path(urlparse(str(source)).path).suffix
    else:
        path = Path(source)
        if not path.exists():
            raise WordBankLoadError(f"Missing word bank: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise WordBankLoadError(f"Cannot read word bank {path}: {exc}") from exc
        suffix = path.suffix

    entries = parse_word_bank(text, suffix)
    LOGGER.info("Loaded %d word bank entries from %s", len(entries), source)
    return entries


def fetch_text(url: str, timeout_seconds: float = 30.0) -> str:
    try:
        response = requests.get(url, timeout=timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise WordBankLoadError(f"Word bank request failed: {exc}") from exc
    return response.text


def parse_word_bank(text: str, suffix: str = "") -> List[WordEntry]:
    suffix = suffix.lower()
    if suffix in {".tsv", ".csv"}:
        delimiter = "\t" if suffix == ".tsv" else ","
        rows = list(csv.reader(io.StringIO(text), delimiter=delimiter))
        if rows and tuple(cell.strip().lower() for cell in rows[0][:2]) == HEADER_NAMES:
            rows = rows[1:]
        pairs = [(row[0], row[1] if len(row) > 1 else "") for row in rows if row]
    else:
        pairs = list(parse_word_lines(text.splitlines()))
    return sanitize_entries(pairs)


def parse_word_lines(lines: Iterable[str]) -> Iterable[tuple[str, str]]:
    """Yield ``(answer, clue)`` from ``ANSWER:Clue`` lines."""
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        answer, _, clue = line.partition(":")
        yield answer.strip(), clue.strip()


def sanitize_entries(pairs: Sequence[tuple[str, str]]) -> List[WordEntry]:
    entries: List[WordEntry] = []
    for raw_answer, clue in pairs:
        answer = clean_answer(raw_answer)
        if not answer:
            LOGGER.warning("Skipping word bank entry without letters: %r", raw_answer)
            continue
        entries.append(WordEntry(answer=answer, clue=clue.strip()))
    return entries
