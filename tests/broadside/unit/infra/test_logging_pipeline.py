import json
import logging

from broadside.game.infra.logging import (
    JsonFormatter,
    LoggingConfig,
    build_logging_config,
    configure_logging,
    shutdown_logging,
)


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1},
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["fields"] == {"custom": 1}
    assert payload["level"] == "INFO"


def test_build_logging_config_reads_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BROADSIDE_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("BROADSIDE_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    config = build_logging_config()
    assert config.level_name == "DEBUG"
    assert config.console_format == "json"
    assert config.console_level_name == "WARNING"
    assert config.file_path is not None
    assert config.file_path.startswith(str(tmp_path / "logs"))


def test_configure_logging_writes_json_lines(tmp_path) -> None:
    log_file = tmp_path / "run.jsonl"
    configure_logging(LoggingConfig(level_name="DEBUG", file_path=str(log_file)))
    try:
        logging.getLogger("test.logging.file").info("hello", extra={"shots": 3})
    finally:
        shutdown_logging()
    lines = log_file.read_text(encoding="utf-8").splitlines()
    record = json.loads(lines[-1])
    assert record["msg"] == "hello"
    assert record["fields"]["shots"] == 3
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_console_only() -> None:
    configure_logging(LoggingConfig(level_name="INFO", console_format="text"))
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.handlers[0].level == logging.WARNING
