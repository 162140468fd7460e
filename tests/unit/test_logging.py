"""Unit tests for the JSON log formatter."""

from __future__ import annotations

import io
import json
import logging
import sys

from composite_tasks.logging import JsonFormatter, configure_logging


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="composite_tasks.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Saved %s",
        args=("tree",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_emits_core_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record()))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "composite_tasks.test"
    assert payload["message"] == "Saved tree"
    assert "timestamp" in payload
    assert "extra" not in payload


def test_formatter_collects_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record(path="cake.json", root="Make Cake")))

    assert payload["extra"] == {"path": "cake.json", "root": "Make Cake"}


def test_formatter_includes_exception() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JsonFormatter().format(record))

    assert "ValueError: boom" in payload["exception"]


def test_configure_logging_replaces_root_handlers() -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        stream = io.StringIO()
        configure_logging("warning", stream=stream)
        configure_logging("info", stream=stream)

        assert len(root.handlers) == 1
        assert root.level == logging.INFO

        logging.getLogger("composite_tasks.test").info("hello", extra={"k": 1})
        line = stream.getvalue().strip().splitlines()[-1]
        assert json.loads(line)["extra"] == {"k": 1}
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
