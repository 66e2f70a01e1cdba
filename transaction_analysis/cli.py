"""CLI for the ``transaction_analysis`` package.

This module exposes plain command handlers (``cmd_*``, each returning a process
exit code) and a Typer-based console interface that wraps them. The root
callback loads a local ``.env`` with ``python-dotenv`` and configures logging
before any command runs. Query logic lives in
:class:`transaction_analysis.ledger.TransactionLedger`.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .dates import parse_transaction_date
from .errors import TransactionAnalysisError
from .ingest import load_transactions_json
from .ledger import TransactionLedger
from .logging_setup import configure_logging, get_logger
from .models import TransactionRecord
from .report import render_summary, render_transactions

logger = get_logger("transaction_analysis.cli")

JSON_PATH_ENV_VAR = "TRANSACTION_ANALYSIS_JSON_PATH"


# ---- Command handlers ---------------------------------------------------------


def _load_ledger(json_path: str | Path) -> TransactionLedger | None:
    """Load a ledger, reporting failures on stderr and returning ``None``."""

    try:
        records = load_transactions_json(json_path)
    except FileNotFoundError:
        print(f"Error: File not found: {json_path}", file=sys.stderr)
        return None
    except PermissionError:
        print(f"Error: Permission denied: {json_path}", file=sys.stderr)
        return None
    except TransactionAnalysisError as e:
        print(f"Error: Failed to load transactions: {e}", file=sys.stderr)
        return None
    except OSError as e:
        print(f"Error: Unexpected failure reading '{json_path}': {e}", file=sys.stderr)
        return None
    return TransactionLedger(records)


def _with_ledger(json_path: str | Path, action: Callable[[TransactionLedger], int]) -> int:
    ledger = _load_ledger(json_path)
    if ledger is None:
        return 1
    return action(ledger)


def _require_date(value: str, label: str) -> bool:
    if parse_transaction_date(value) is None:
        print(f"Error: {label} is not a valid date: {value!r}", file=sys.stderr)
        return False
    return True


def cmd_summary(json_path: str | Path) -> int:
    """Print the aggregate summary for a transactions file."""

    def run(ledger: TransactionLedger) -> int:
        print(render_summary(ledger))
        return 0

    return _with_ledger(json_path, run)


def cmd_total(
    json_path: str | Path,
    *,
    year: int | None = None,
    month: int | None = None,
    day: int | None = None,
) -> int:
    """Print the total amount, optionally restricted by date components."""

    def run(ledger: TransactionLedger) -> int:
        total = ledger.calculate_total_amount_by_date(year=year, month=month, day=day)
        print(f"{total:.2f}")
        return 0

    return _with_ledger(json_path, run)


def cmd_by_type(json_path: str | Path, transaction_type: str) -> int:
    return _with_ledger(
        json_path,
        lambda ledger: _print_records(ledger.get_transactions_by_type(transaction_type)),
    )


def cmd_by_merchant(json_path: str | Path, merchant_name: str) -> int:
    return _with_ledger(
        json_path,
        lambda ledger: _print_records(ledger.get_transactions_by_merchant(merchant_name)),
    )


def cmd_date_range(json_path: str | Path, start_date: str, end_date: str) -> int:
    """Print records dated within ``[start_date, end_date]``.

    Bounds are validated up front so a typo is reported instead of silently
    producing an empty table.
    """

    if not (_require_date(start_date, "start date") and _require_date(end_date, "end date")):
        return 2
    return _with_ledger(
        json_path,
        lambda ledger: _print_records(ledger.get_transactions_in_date_range(start_date, end_date)),
    )


def cmd_before(json_path: str | Path, before: str) -> int:
    if not _require_date(before, "date"):
        return 2
    return _with_ledger(
        json_path,
        lambda ledger: _print_records(ledger.get_transactions_before_date(before)),
    )


def cmd_amount_range(json_path: str | Path, min_amount: float, max_amount: float) -> int:
    return _with_ledger(
        json_path,
        lambda ledger: _print_records(
            ledger.get_transactions_by_amount_range(min_amount, max_amount)
        ),
    )


def cmd_find(json_path: str | Path, transaction_id: str) -> int:
    """Print the record with ``transaction_id``; exit 1 when there is none."""

    def run(ledger: TransactionLedger) -> int:
        tx = ledger.find_transaction_by_id(transaction_id)
        if tx is None:
            print(f"Error: No transaction with id {transaction_id!r}", file=sys.stderr)
            return 1
        return _print_records([tx])

    return _with_ledger(json_path, run)


def cmd_descriptions(json_path: str | Path) -> int:
    def run(ledger: TransactionLedger) -> int:
        for description in ledger.map_transaction_descriptions():
            print(description)
        return 0

    return _with_ledger(json_path, run)


def cmd_dump(json_path: str | Path) -> int:
    def run(ledger: TransactionLedger) -> int:
        print(ledger.serialize())
        return 0

    return _with_ledger(json_path, run)


def _print_records(records: Iterable[TransactionRecord]) -> int:
    print(render_transactions(records))
    return 0


# ---- Typer-based console interface -------------------------------------------


# Module-level option object to satisfy ruff B008 (no calls in parameter
# defaults). Typer inspects it through the ``Annotated`` metadata below.
JSON_PATH_OPTION: OptionInfo = typer.Option(
    ...,  # required unless the env var is set
    "--json-path",
    envvar=JSON_PATH_ENV_VAR,
    help="Path to a JSON file holding an array of transactions.",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Aggregate, filter and look up transactions from a JSON file.",
)


def _exit_with(code: int) -> None:
    if code:
        raise typer.Exit(code)


@app.command("summary")
def summary_cmd(json_path: Annotated[Path, JSON_PATH_OPTION]) -> None:
    """Print totals, averages and busiest months."""

    _exit_with(cmd_summary(json_path))


@app.command("total")
def total_cmd(
    json_path: Annotated[Path, JSON_PATH_OPTION],
    *,
    year: int | None = typer.Option(None, help="Only count transactions in this year."),
    month: int | None = typer.Option(
        None, min=1, max=12, help="Only count transactions in this month (1-12)."
    ),
    day: int | None = typer.Option(
        None, min=1, max=31, help="Only count transactions on this day of the month."
    ),
) -> None:
    """Print the total amount, optionally filtered by year/month/day."""

    _exit_with(cmd_total(json_path, year=year, month=month, day=day))


@app.command("by-type")
def by_type_cmd(
    transaction_type: Annotated[str, typer.Argument(help="e.g. debit or credit")],
    json_path: Annotated[Path, JSON_PATH_OPTION],
) -> None:
    """List transactions of one type."""

    _exit_with(cmd_by_type(json_path, transaction_type))


@app.command("by-merchant")
def by_merchant_cmd(
    merchant_name: Annotated[str, typer.Argument(help="Exact merchant name.")],
    json_path: Annotated[Path, JSON_PATH_OPTION],
) -> None:
    """List transactions made with one merchant."""

    _exit_with(cmd_by_merchant(json_path, merchant_name))


@app.command("date-range")
def date_range_cmd(
    start_date: Annotated[str, typer.Argument(help="Inclusive start date, e.g. 2019-01-01.")],
    end_date: Annotated[str, typer.Argument(help="Inclusive end date, e.g. 2019-01-31.")],
    json_path: Annotated[Path, JSON_PATH_OPTION],
) -> None:
    """List transactions dated within an inclusive range."""

    _exit_with(cmd_date_range(json_path, start_date, end_date))


@app.command("before")
def before_cmd(
    before: Annotated[str, typer.Argument(help="Exclusive upper bound, e.g. 2019-02-01.")],
    json_path: Annotated[Path, JSON_PATH_OPTION],
) -> None:
    """List transactions dated strictly before a date."""

    _exit_with(cmd_before(json_path, before))


@app.command("amount-range")
def amount_range_cmd(
    json_path: Annotated[Path, JSON_PATH_OPTION],
    *,
    min_amount: float = typer.Option(..., "--min", help="Inclusive lower bound."),
    max_amount: float = typer.Option(..., "--max", help="Inclusive upper bound."),
) -> None:
    """List transactions whose amount lies within an inclusive range."""

    _exit_with(cmd_amount_range(json_path, min_amount, max_amount))


@app.command("find")
def find_cmd(
    transaction_id: Annotated[str, typer.Argument(help="Transaction id to look up.")],
    json_path: Annotated[Path, JSON_PATH_OPTION],
) -> None:
    """Show one transaction by id."""

    _exit_with(cmd_find(json_path, transaction_id))


@app.command("descriptions")
def descriptions_cmd(json_path: Annotated[Path, JSON_PATH_OPTION]) -> None:
    """Print every transaction description, one per line."""

    _exit_with(cmd_descriptions(json_path))


@app.command("dump")
def dump_cmd(json_path: Annotated[Path, JSON_PATH_OPTION]) -> None:
    """Print all transactions as pretty-printed JSON."""

    _exit_with(cmd_dump(json_path))


@app.callback()
def _root(
    *,
    log_level: str | None = typer.Option(
        None,
        help="Logging level (falls back to TRANSACTION_ANALYSIS_LOG_LEVEL, then INFO).",
    ),
) -> None:
    """Load ``.env`` from the working directory and configure logging."""

    # override=False keeps variables already set in the environment
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging(log_level)
    logger.debug("transaction-analysis starting")


if __name__ == "__main__":  # pragma: no cover
    app()
