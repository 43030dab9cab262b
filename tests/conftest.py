"""Test configuration and shared fixtures."""

from collections.abc import Iterator

import pytest

from treequery.logging_utils import reset_logging


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Keep TREEQUERY_* variables and any .env file out of the tests."""
    for name in ("TREEQUERY_LIMIT", "TREEQUERY_BIND_NAME", "TREEQUERY_LOG_PROFILE", "TREEQUERY_LOG_FILTER"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    reset_logging()
