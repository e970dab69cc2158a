"""Application states for the console menu loop."""

from enum import Enum, auto


class AppState(Enum):
    """Top-level application states."""

    MAIN_MENU = auto()
    BATTLE = auto()
    EXIT = auto()
