"""Persistence layer for the top-scores text file."""

from __future__ import annotations

import logging
from pathlib import Path

from broadside.game.scores.schema import ScoreEntry, format_score_line, parse_score_line

logger = logging.getLogger(__name__)


class ScoreRepository:
    """Plain-text repository, one score record per line."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def read_entries(self) -> list[ScoreEntry]:
        """Read every well-formed record; a missing file means no scores."""
        if not self._path.exists():
            return []
        entries: list[ScoreEntry] = []
        for lineno, raw_line in enumerate(self._path.read_bytes().splitlines(), start=1):
            try:
                line = raw_line.decode("utf-8").strip()
                if not line:
                    continue
                entries.append(parse_score_line(line))
            except ValueError:
                # UnicodeDecodeError is a ValueError.
                logger.warning("score_line_skipped path=%s line=%d", self._path, lineno)
        return entries

    def write_entries(self, entries: list[ScoreEntry]) -> None:
        """Overwrite the file with the given records."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as handle:
            for entry in entries:
                handle.write(format_score_line(entry) + "\n")
