"""Console controller: main menu, battle turns, save/resume and scoring."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from broadside.game.app.console import (
    describe_outcome,
    render_help,
    render_main_menu,
    render_ocean_grid,
    render_scores,
    render_status,
    render_target_grid,
)
from broadside.game.app.state_machine import AppState
from broadside.game.core.coords import describe_parse_error
from broadside.game.core.errors import (
    CoordinateParseError,
    PersistenceError,
    PlacementExhaustedError,
    SaveNotFoundError,
)
from broadside.game.core.rules import (
    FireReport,
    GameSession,
    fire_at,
    new_session,
    quit_game,
    start_game,
)
from broadside.game.infra.config import GameConfig
from broadside.game.saves.service import SaveService
from broadside.game.scores.service import ScoreService

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]

QUIT_COMMAND = "quit"


class GameController:
    """Drive the game from line-oriented input.

    ``read_line`` receives a prompt and returns one line; raising ``EOFError``
    ends the program.
    """

    def __init__(
        self,
        *,
        config: GameConfig,
        rng: random.Random,
        save_service: SaveService,
        score_service: ScoreService,
        read_line: ReadLine = input,
        write: Write = print,
    ) -> None:
        self._config = config
        self._rng = rng
        self._saves = save_service
        self._scores = score_service
        self._read_line = read_line
        self._write = write
        self._session: GameSession = new_session()
        self._state = AppState.MAIN_MENU

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def session(self) -> GameSession:
        return self._session

    def run(self) -> None:
        """Run until the player quits or input ends."""
        self._write("Welcome to Battleship!")
        while self._state is not AppState.EXIT:
            try:
                if self._state is AppState.BATTLE:
                    self._battle_turn()
                else:
                    self._main_menu()
            except EOFError:
                logger.info("input_closed state=%s", self._state.name)
                self._state = AppState.EXIT
        self._write("Exiting game. Goodbye!")

    def _main_menu(self) -> None:
        self._write(render_main_menu())
        choice = self._read_line("Enter your choice (1-5): ").strip()
        handlers: dict[str, Callable[[], None]] = {
            "1": self.new_game,
            "2": self.resume_game,
            "3": self.show_scores,
            "4": self.show_help,
            "5": self._exit,
        }
        handler = handlers.get(choice)
        if handler is None:
            self._write("Invalid choice. Please try again.")
            return
        handler()

    def new_game(self) -> None:
        """Start a fresh session and enter battle."""
        session = new_session()
        try:
            start_game(session, self._rng, max_attempts=self._config.placement_attempts)
        except PlacementExhaustedError as exc:
            logger.warning("new_game_failed unplaced=%s", ",".join(exc.unplaced))
            self._write(f"Error: could not set up the enemy fleet ({exc}). Please try again.")
            self._state = AppState.MAIN_MENU
            return
        self._session = session
        self._state = AppState.BATTLE
        self._write("New game initialized. The computer has secretly placed its ships.")

    def resume_game(self) -> None:
        """Resume the saved session, falling back to a new game."""
        try:
            self._session = self._saves.load()
        except SaveNotFoundError:
            self._write("No saved game found. Starting a new game instead.")
            self.new_game()
            return
        except PersistenceError as exc:
            self._write(f"Error loading saved game ({exc}). Starting a new game instead.")
            self.new_game()
            return
        self._state = AppState.BATTLE
        self._write("Game resumed.")

    def show_scores(self) -> None:
        try:
            board = self._scores.top_scores()
        except OSError as exc:
            logger.warning("score_read_failed", exc_info=True)
            self._write(f"Error: could not read scores ({exc}).")
            return
        self._write(render_scores(board))

    def show_help(self) -> None:
        self._write(render_help())

    def _exit(self) -> None:
        self._state = AppState.EXIT

    def _battle_turn(self) -> None:
        session = self._session
        self._write(render_target_grid(session.target, session.last_shot))
        self._write(render_status(session))
        self._write(f"Enter '{QUIT_COMMAND}' to return to main menu.")
        command = self._read_line("Your command (e.g., A5 or quit): ").strip()
        if command.lower() == QUIT_COMMAND:
            self._abandon()
            return
        try:
            report = fire_at(session, command)
        except CoordinateParseError as exc:
            self._write(f"Error: {describe_parse_error(exc.kind, session.size)}")
            return
        self._write(describe_outcome(report))
        if report.won:
            self._finish(report)

    def _abandon(self) -> None:
        answer = self._read_line("Save current game before returning to menu? (Y/N): ")
        if _is_yes(answer):
            try:
                self._saves.save(self._session)
            except PersistenceError as exc:
                self._write(f"Error saving game: {exc}")
                return
            self._write("Game saved.")
        quit_game(self._session)
        self._state = AppState.MAIN_MENU
        self._write("Returning to Main Menu...")

    def _finish(self, report: FireReport) -> None:
        session = self._session
        self._state = AppState.MAIN_MENU
        self._write(render_target_grid(session.target))
        self._write(render_status(session))
        self._write("CONGRATULATIONS! You sunk all enemy ships!")
        self._discard_save()
        self._write(f"Total missiles fired: {report.score}")
        if report.perfect:
            self._write("A PERFECT GAME! You used the minimum possible missiles!")
        if report.score is not None:
            self._record_score(report.score)
        if _is_yes(self._read_line("Would you like to see the computer's ship placements? (Y/N): ")):
            self._write(render_ocean_grid(session.ocean))

    def _discard_save(self) -> None:
        # A finished game must not be resumable.
        if not self._saves.has_save():
            return
        try:
            self._saves.discard()
        except PersistenceError as exc:
            self._write(f"Warning: {exc}")

    def _record_score(self, score: int) -> None:
        try:
            qualifies = self._scores.qualifies(score)
        except OSError as exc:
            logger.warning("score_read_failed score=%d", score, exc_info=True)
            self._write(f"Error: could not read scores ({exc}).")
            return
        if not qualifies:
            self._write(
                f"Good game! Your score of {score} missiles was not quite enough for the Top 10 this time."
            )
            return
        self._write("Congratulations! You've made the Top 10 high scores!")
        while True:
            initials = self._read_line("Enter your initials (3 characters, e.g., ACE): ")
            try:
                board, rank = self._scores.record(initials, score)
            except ValueError as exc:
                self._write(f"Error: {exc} Please try again.")
                continue
            except OSError as exc:
                logger.warning("score_record_failed score=%d", score, exc_info=True)
                self._write(f"Error: could not write scores ({exc}).")
                return
            break
        self._write(f"Your score has been recorded at rank {rank}!")
        self._write(render_scores(board))


def _is_yes(answer: str) -> bool:
    return answer.strip().upper().startswith("Y")
