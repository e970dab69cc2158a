"""Application configuration and env loading."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from broadside.game.core.models import DEFAULT_PLACEMENT_ATTEMPTS

DEFAULT_SAVE_FILE = "battleship_save_game.json"
DEFAULT_SCORE_FILE = "topTenScores.txt"


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Later files win. Default order:
    1) appdata/config/.env.app
    2) appdata/config/.env.app.local
    3) .env.app
    4) .env.app.local
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env.app",
            "appdata/config/.env.app.local",
            ".env.app",
            ".env.app.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _text(name: str, default: str) -> str:
    return os.getenv(name, "").strip() or default


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable game configuration sourced from environment."""

    seed: int | None = None
    placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS
    save_file: str = DEFAULT_SAVE_FILE
    score_file: str = DEFAULT_SCORE_FILE

    @classmethod
    def from_env(cls) -> GameConfig:
        attempts = _int("BROADSIDE_PLACEMENT_ATTEMPTS", DEFAULT_PLACEMENT_ATTEMPTS)
        return cls(
            seed=_int("BROADSIDE_SEED", None),
            placement_attempts=max(1, attempts or DEFAULT_PLACEMENT_ATTEMPTS),
            save_file=_text("BROADSIDE_SAVE_FILE", DEFAULT_SAVE_FILE),
            score_file=_text("BROADSIDE_SCORE_FILE", DEFAULT_SCORE_FILE),
        )


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, frozen exe dir, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            frozen_dir_candidate = Path(executable).resolve().parent / path
            if frozen_dir_candidate.exists():
                return frozen_dir_candidate

    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[3]
    return project_root / path
