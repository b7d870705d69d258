import json
import logging

from quote_engine.core.observability import setup_logging


def test_setup_logging_emits_json(monkeypatch, capsys):
    root = logging.getLogger()
    previous_handlers, previous_level = root.handlers[:], root.level
    monkeypatch.setenv("LOG_LEVEL", "info")
    try:
        setup_logging()
        assert root.level == logging.INFO
        logging.getLogger("quote_engine.test").info("priced %s", "quote")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["message"] == "priced quote"
        assert record["levelname"] == "INFO"
        assert record["name"] == "quote_engine.test"
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)


def test_access_log_disabled_by_flag(monkeypatch):
    monkeypatch.setenv("DISABLE_ACCESS_LOG", "true")
    access = logging.getLogger("uvicorn.access")
    root = logging.getLogger()
    previous_handlers, previous_level = root.handlers[:], root.level
    try:
        setup_logging()
        assert access.disabled
    finally:
        access.disabled = False
        access.propagate = True
        root.handlers = previous_handlers
        root.setLevel(previous_level)
