import json
import logging
import sys

from pytest import LogCaptureFixture, MonkeyPatch

from armlib.logger import TRACE, JsonFormatter, LoggingConfig, log, setup_logger, setup_logger_from_config


def clean_environment(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["arm-test"])
    for name in ("ARM_LOG_TEXT", "ARM_LOG_FORMAT", "ARM_TRACE", "ARM_VERBOSE", "ARM_QUIET"):
        monkeypatch.delenv(name, raising=False)


def test_logging() -> None:
    assert type(log) is logging.Logger
    assert log.name == "arm"
    assert logging.getLevelName(TRACE) == "TRACE"


def test_json_logging() -> None:
    format = JsonFormatter({"level": "levelname", "message": "message"})
    record = logging.getLogger().makeRecord("test", logging.INFO, "test", 1, "test message", (), None)
    assert format.format(record) == '{"level": "INFO", "message": "test message"}'
    with_static = JsonFormatter({"level": "levelname", "message": "message"}, static_values={"process": "arm-test"})
    record = logging.getLogger().makeRecord("test", logging.WARNING, "test", 1, "%s failed", ("page",), None)
    expected = {"level": "WARNING", "message": "page failed", "process": "arm-test"}
    assert json.loads(with_static.format(record)) == expected


def test_json_logging_with_exception() -> None:
    format = JsonFormatter({"message": "message"})
    try:
        raise ValueError("broken")
    except ValueError:
        record = logging.getLogger().makeRecord("test", logging.ERROR, "test", 1, "boom", (), sys.exc_info())
    js = json.loads(format.format(record))
    assert js["message"] == "boom"
    assert "ValueError: broken" in js["exception"]


def test_trace(caplog: LogCaptureFixture) -> None:
    caplog.set_level(TRACE, logger="arm")
    logging.getLogger("arm.test").trace("very detailed")  # type: ignore
    assert caplog.records[-1].levelname == "TRACE"
    assert caplog.records[-1].getMessage() == "very detailed"


def test_setup_logger(monkeypatch: MonkeyPatch, restore_logging: None) -> None:
    clean_environment(monkeypatch)
    setup_logger("arm-test")
    assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)
    monkeypatch.setenv("ARM_LOG_TEXT", "true")
    setup_logger("arm-test")
    assert not isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)
    setup_logger("arm-test", level="ERROR")
    assert logging.getLogger("arm").level == logging.ERROR
    setup_logger("arm-test", verbose=True)
    assert logging.getLogger("arm").level == logging.DEBUG
    setup_logger("arm-test", quiet=True)
    assert logging.getLogger("arm").level == logging.CRITICAL
    assert logging.getLogger().level == logging.WARNING
    monkeypatch.setenv("ARM_TRACE", "true")
    setup_logger("arm-test")
    assert logging.getLogger("arm").level == TRACE


def test_setup_logger_from_config(monkeypatch: MonkeyPatch, restore_logging: None) -> None:
    clean_environment(monkeypatch)
    setup_logger_from_config("arm-test", LoggingConfig(verbose=True, json_format=False))
    assert logging.getLogger("arm").level == logging.DEBUG
    assert not isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)
    setup_logger_from_config("arm-test", LoggingConfig())
    assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)
