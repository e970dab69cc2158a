"""Save and resume use cases."""

from __future__ import annotations

import logging

import orjson

from broadside.game.core.errors import PersistenceError, SaveNotFoundError
from broadside.game.core.rules import GameSession, resume_game
from broadside.game.saves.repository import SaveRepository
from broadside.game.saves.schema import payload_to_session, session_to_payload

logger = logging.getLogger(__name__)


class SaveService:
    """High-level session persistence with schema validation."""

    def __init__(self, repository: SaveRepository) -> None:
        self._repository = repository

    def has_save(self) -> bool:
        return self._repository.exists()

    def save(self, session: GameSession) -> None:
        """Persist the whole session; raises ``PersistenceError`` on failure."""
        data = orjson.dumps(session_to_payload(session))
        try:
            self._repository.save_bytes(data)
        except OSError as exc:
            logger.warning("session_save_failed path=%s", self._repository.path, exc_info=True)
            raise PersistenceError(f"Could not save game: {exc}") from exc
        logger.info("session_saved path=%s bytes=%d", self._repository.path, len(data))

    def load(self) -> GameSession:
        """Load the saved session and mark it in progress."""
        if not self._repository.exists():
            raise SaveNotFoundError(f"No saved game at {self._repository.path}.")
        try:
            payload = orjson.loads(self._repository.load_bytes())
        except (OSError, orjson.JSONDecodeError) as exc:
            logger.warning("session_load_failed path=%s", self._repository.path, exc_info=True)
            raise PersistenceError(f"Could not read saved game: {exc}") from exc
        if not isinstance(payload, dict):
            raise PersistenceError("Saved game is not a snapshot object.")
        try:
            session = payload_to_session(payload)
        except ValueError as exc:
            logger.warning("session_snapshot_invalid path=%s reason=%s", self._repository.path, exc)
            raise PersistenceError(f"Saved game is invalid: {exc}") from exc
        logger.info("session_loaded path=%s shots=%d", self._repository.path, session.shots_fired)
        return resume_game(session)

    def discard(self) -> None:
        """Remove the saved session if present."""
        try:
            self._repository.delete()
        except OSError as exc:
            logger.warning("session_discard_failed path=%s", self._repository.path, exc_info=True)
            raise PersistenceError(f"Could not remove saved game: {exc}") from exc
        logger.info("session_discarded path=%s", self._repository.path)
