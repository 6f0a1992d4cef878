"""Persistent daily puzzle document store.

Each generated puzzle is saved as a JSON document named after its date under
``local_db/puzzles/``. Documents are frontend-ready: grid, numbering, bounds,
placements, clue lists and summary stats.
"""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..utils.logger import get_logger
from .interlock import count_intersections

if TYPE_CHECKING:
    from ..core.models import PuzzleResult
    from .generator import GeneratorConfig


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/puzzles")


class PuzzleStore:
    """Save generated puzzles as structured JSON documents keyed by date."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def save(
        self,
        result: "PuzzleResult",
        date_string: str,
        config: Optional["GeneratorConfig"] = None,
    ) -> Path:
        """Persist ``result`` for ``date_string``, replacing any earlier document."""
        doc = {
            "date": date_string,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "config": asdict(config) if config is not None else None,
            "puzzle": result.to_jsonable(),
            "stats": self._compute_stats(result),
        }
        path = self.path_for(date_string)
        path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Puzzle saved: %s", path)
        return path

    def load(self, date_string: str) -> Optional[Dict[str, Any]]:
        path = self.path_for(date_string)
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    def path_for(self, date_string: str) -> Path:
        return self.store_dir / f"{date_string}.json"

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _compute_stats(result: "PuzzleResult") -> Dict[str, Any]:
        lengths = [p.length for p in result.placements]
        length_dist = Counter(lengths)
        return {
            "grid": {
                "size": result.size,
                "letter_cells": result.letter_count(),
                "box_rows": result.bounds.rows,
                "box_cols": result.bounds.cols,
            },
            "words": {
                "placed": len(result.placements),
                "across": len(result.across),
                "down": len(result.down),
                "intersections": count_intersections(result.size, result.placements),
                "length_min": min(lengths) if lengths else 0,
                "length_max": max(lengths) if lengths else 0,
                "length_avg": round(sum(lengths) / len(lengths), 1) if lengths else 0.0,
                "length_distribution": {str(k): v for k, v in sorted(length_dist.items())},
            },
        }
