from __future__ import annotations

import os

from broadside.game.infra.config import (
    DEFAULT_SAVE_FILE,
    DEFAULT_SCORE_FILE,
    GameConfig,
    load_default_env_files,
    load_env_file,
)


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "A=1\nB='two'\n#comment\nINVALID\nC=three\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("C", "already")
    monkeypatch.delenv("A", raising=False)
    monkeypatch.delenv("B", raising=False)
    load_env_file(str(env_file))
    assert os.environ.get("A") == "1"
    assert os.environ.get("B") == "two"
    assert os.environ.get("C") == "three"


def test_load_env_file_can_preserve_existing_values(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("C=three\n", encoding="utf-8")
    monkeypatch.setenv("C", "already")
    load_env_file(str(env_file), override_existing=False)
    assert os.environ.get("C") == "already"


def test_load_default_env_files_honors_order(tmp_path, monkeypatch) -> None:
    app_env = tmp_path / ".env.app"
    app_local_env = tmp_path / ".env.app.local"
    app_env.write_text("BROADSIDE_SEED=1\nBROADSIDE_SAVE_FILE=game.json\n", encoding="utf-8")
    app_local_env.write_text("BROADSIDE_SEED=2\n", encoding="utf-8")
    monkeypatch.delenv("BROADSIDE_SEED", raising=False)
    monkeypatch.delenv("BROADSIDE_SAVE_FILE", raising=False)

    load_default_env_files(paths=(str(app_env), str(app_local_env)))

    assert os.environ.get("BROADSIDE_SEED") == "2"
    assert os.environ.get("BROADSIDE_SAVE_FILE") == "game.json"


def test_game_config_defaults(monkeypatch) -> None:
    for name in (
        "BROADSIDE_SEED",
        "BROADSIDE_PLACEMENT_ATTEMPTS",
        "BROADSIDE_SAVE_FILE",
        "BROADSIDE_SCORE_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    config = GameConfig.from_env()
    assert config.seed is None
    assert config.placement_attempts == 1000
    assert config.save_file == DEFAULT_SAVE_FILE
    assert config.score_file == DEFAULT_SCORE_FILE


def test_game_config_reads_env_and_ignores_garbage(monkeypatch) -> None:
    monkeypatch.setenv("BROADSIDE_SEED", "99")
    monkeypatch.setenv("BROADSIDE_PLACEMENT_ATTEMPTS", "not-a-number")
    monkeypatch.setenv("BROADSIDE_SCORE_FILE", "  scores.txt ")
    config = GameConfig.from_env()
    assert config.seed == 99
    assert config.placement_attempts == 1000
    assert config.score_file == "scores.txt"
