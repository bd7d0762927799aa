import json
import logging

from search_toolbox.logging_config import JsonFormatter, setup_logging


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord(
        name="search_toolbox.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="search failed: %s",
        args=("boom",),
        exc_info=None,
    )
    record.code = "http_error"

    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "search_toolbox.test"
    assert payload["message"] == "search failed: boom"
    assert payload["code"] == "http_error"


def test_setup_logging_replaces_root_handlers(monkeypatch):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    monkeypatch.setenv("LOG_LEVEL", "debug")
    try:
        setup_logging()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

        setup_logging(fmt="plain")
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
