"""Top-ten leaderboard rules."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from broadside.game.scores.repository import ScoreRepository
from broadside.game.scores.schema import ScoreEntry, validate_initials

MAX_SCORES = 10


def sort_scores(entries: Iterable[ScoreEntry]) -> list[ScoreEntry]:
    """Sort ascending by score; ties keep their existing order."""
    return sorted(entries, key=lambda entry: entry.score)


class ScoreService:
    """Read, qualify and record leaderboard entries."""

    def __init__(self, repository: ScoreRepository, limit: int = MAX_SCORES) -> None:
        self._repository = repository
        self._limit = limit

    def top_scores(self) -> list[ScoreEntry]:
        """Return the stored board, sorted and capped."""
        return sort_scores(self._repository.read_entries())[: self._limit]

    def qualifies(self, score: int) -> bool:
        """Return whether a score would make the board."""
        board = self.top_scores()
        if len(board) < self._limit:
            return True
        return score < board[-1].score

    def record(
        self, initials: str, score: int, achieved: datetime | None = None
    ) -> tuple[list[ScoreEntry], int | None]:
        """Insert a qualifying score and persist the board.

        Returns the updated board and the 1-based rank of the new entry, or
        the unchanged board and ``None`` when the score does not qualify.
        """
        cleaned = validate_initials(initials)
        board = self.top_scores()
        if len(board) >= self._limit and score >= board[-1].score:
            return board, None

        entry = ScoreEntry(
            initials=cleaned,
            score=score,
            achieved=(achieved or datetime.now()).replace(second=0, microsecond=0),
        )
        if len(board) >= self._limit:
            board[-1] = entry
        else:
            board.append(entry)
        board = sort_scores(board)
        self._repository.write_entries(board)
        rank = next(index for index, item in enumerate(board, start=1) if item is entry)
        return board, rank
