"""Structured Logging — JSON formatter fields and root handler ownership.

Tests cover:
    - JSONFormatter emits level, logger, message and known extras
    - setup_logging keeps handlers it did not install
    - Repeated setup_logging leaves exactly one handler of its own
"""

import json
import logging

import pytest

from backlog.infrastructure.observability import JSONFormatter, setup_logging


@pytest.fixture
def root_handlers():
    saved = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers = saved
    logging.root.setLevel(level)


def test_json_formatter_includes_extras():
    record = logging.LogRecord(
        "backlog.test", logging.WARNING, __file__, 1, "tool failed", None, None,
    )
    record.tool_name = "task_status"
    line = json.loads(JSONFormatter().format(record))
    assert line["level"] == "WARNING"
    assert line["logger"] == "backlog.test"
    assert line["message"] == "tool failed"
    assert line["tool_name"] == "task_status"


def test_setup_logging_keeps_foreign_handlers(root_handlers):
    foreign = logging.NullHandler()
    logging.root.addHandler(foreign)
    setup_logging("DEBUG", "text")
    assert foreign in logging.root.handlers
    assert logging.root.level == logging.DEBUG


def test_setup_logging_twice_installs_one_handler(root_handlers):
    before = set(logging.root.handlers)
    setup_logging("INFO", "json")
    setup_logging("INFO", "json")
    added = [h for h in logging.root.handlers if h not in before]
    assert len(added) == 1
    assert isinstance(added[0].formatter, JSONFormatter)
