import pytest
from loguru import logger

from treequery import logging_utils
from treequery.core.pattern import Any
from treequery.core.search import search
from treequery.logging_utils import configure_logging, parse_log_filter


def test_parse_log_filter_global_level() -> None:
    level, filters = parse_log_filter("debug")
    assert level == "debug"
    assert filters == {"": "DEBUG"}


def test_parse_log_filter_modules() -> None:
    level, filters = parse_log_filter("info,treequery.core=trace,treequery.cli=false")
    assert level == "info"
    assert filters == {"treequery.core": "TRACE", "treequery.cli": False, "": "INFO"}


def test_parse_log_filter_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TREEQUERY_LOG_FILTER", "WARNING")
    assert parse_log_filter()[0] == "warning"


def test_library_is_silent_by_default() -> None:
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="TRACE", format="{message}")
    try:
        list(search([1], Any()))
    finally:
        logger.remove(handler_id)
    assert messages == []


def test_search_logs_when_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TREEQUERY_LOG_FILTER", "debug")
    configure_logging(profile="default")
    messages: list[str] = []
    logger.add(messages.append, level="DEBUG", format="{message}")

    shared: list = []
    list(search([shared, shared], Any()))

    assert any(m.startswith("search.start") for m in messages)
    assert any("search.done visited=2 matches=2" in m for m in messages)


def test_configure_is_idempotent_per_profile() -> None:
    configure_logging(profile="default")
    configure_logging(profile="default")
    assert logging_utils._CONFIGURED_PROFILE == "default"
    configure_logging(profile="cli")
    assert logging_utils._CONFIGURED_PROFILE == "cli"

