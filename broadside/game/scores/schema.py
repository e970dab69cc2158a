"""Score entry model and its one-line text format."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

INITIALS_LENGTH = 3
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


@dataclass(frozen=True, slots=True)
class ScoreEntry:
    """One leaderboard row: initials, shots used and when."""

    initials: str
    score: int
    achieved: datetime


def validate_initials(initials: str) -> str:
    """Return cleaned initials or raise ``ValueError``."""
    cleaned = initials.strip()
    if len(cleaned) != INITIALS_LENGTH or any(char.isspace() for char in cleaned):
        raise ValueError(f"Initials must be exactly {INITIALS_LENGTH} characters.")
    return cleaned


def format_score_line(entry: ScoreEntry) -> str:
    return f"{entry.initials} {entry.score} {entry.achieved.strftime(TIMESTAMP_FORMAT)}"


def parse_score_line(line: str) -> ScoreEntry:
    """Parse ``<initials> <score> <YYYY-MM-DD HH:MM>``."""
    parts = line.split(maxsplit=2)
    if len(parts) != 3:
        raise ValueError(f"Malformed score line: {line!r}")
    initials, raw_score, raw_when = parts
    try:
        score = int(raw_score)
        achieved = datetime.strptime(raw_when.strip(), TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise ValueError(f"Malformed score line: {line!r}") from exc
    return ScoreEntry(initials=validate_initials(initials), score=score, achieved=achieved)
