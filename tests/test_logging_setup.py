import io
import logging

from transaction_analysis.logging_setup import configure_logging, get_logger

PKG = "transaction_analysis"


def test_get_logger_installs_null_handler_until_configured():
    logger = get_logger(f"{PKG}.ledger")

    assert logger.name == f"{PKG}.ledger"
    assert any(isinstance(h, logging.NullHandler) for h in logging.getLogger(PKG).handlers)


def test_configure_logging_attaches_single_stream_handler():
    stream = io.StringIO()
    get_logger(f"{PKG}.ingest")

    configure_logging("DEBUG", stream=stream)
    configure_logging("ERROR", stream=io.StringIO())  # no-op after the first call
    get_logger(f"{PKG}.ingest").debug("hello %s", "there")

    pkg = logging.getLogger(PKG)
    assert len(pkg.handlers) == 1
    assert pkg.level == logging.DEBUG
    assert pkg.propagate is False
    assert "transaction_analysis.ingest DEBUG hello there" in stream.getvalue()


def test_level_falls_back_to_environment(monkeypatch):
    monkeypatch.setenv("TRANSACTION_ANALYSIS_LOG_LEVEL", "error")

    configure_logging(stream=io.StringIO())

    assert logging.getLogger(PKG).level == logging.ERROR


def test_numeric_level():
    configure_logging("15", stream=io.StringIO())
    assert logging.getLogger(PKG).level == 15


def test_unknown_level_name_defaults_to_info():
    configure_logging("chatty", stream=io.StringIO())
    assert logging.getLogger(PKG).level == logging.INFO
