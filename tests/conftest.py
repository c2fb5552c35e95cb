import subprocess

import pytest

from spectrbar.retrievers.base import DataRetriever
from spectrbar.types import Data


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that do not perform real I/O")
    config.addinivalue_line(
        "markers", "integration: Integration tests running real commands and files"
    )
    config.addinivalue_line("markers", "performance: pytest-benchmark benchmarks")


class StaticRetriever(DataRetriever):
    """Retriever returning a fixed value and counting how often it was asked."""

    def __init__(self, data: Data) -> None:
        self.data = data
        self.calls = 0

    def describe(self) -> str:
        return "static"

    def retrieve(self, is_numeric: bool) -> Data:
        self.calls += 1
        return self.data


@pytest.fixture
def static_retriever():
    """Factory fixture building StaticRetriever instances."""
    return StaticRetriever


@pytest.fixture
def hello_file(tmp_path):
    """File whose first line is 'hello 32' with no trailing newline."""
    path = tmp_path / "test.txt"
    path.write_text("hello 32")
    return path


@pytest.fixture
def fake_run(monkeypatch):
    """Factory fixture replacing subprocess.run for extern retrievers.

    Pass either the stdout bytes to return or an exception instance to raise.
    The list of argument vectors seen is returned for inspection.
    """

    def _fake_run(result):
        calls = []

        def _run(args, **kwargs):
            calls.append(list(args))
            if isinstance(result, BaseException):
                raise result
            return subprocess.CompletedProcess(args, 0, stdout=result)

        monkeypatch.setattr("spectrbar.retrievers.extern.subprocess.run", _run)
        return calls

    return _fake_run
