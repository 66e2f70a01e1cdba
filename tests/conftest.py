"""Pytest configuration for test isolation.

The CLI configures the package logger once per process and reads
``TRANSACTION_ANALYSIS_*`` variables (and a ``.env`` in the working
directory). Each test gets a clean logger, a scrubbed environment and its own
working directory so none of that state leaks between tests.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from transaction_analysis.logging_setup import reset_logging


@pytest.fixture(autouse=True)
def _isolate_process_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset logging, drop package env vars and run inside ``tmp_path``."""

    for var in ("TRANSACTION_ANALYSIS_JSON_PATH", "TRANSACTION_ANALYSIS_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_logging()
    yield
    reset_logging()
