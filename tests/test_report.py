from tests.helpers.records import make_tx, scenario_records
from transaction_analysis import TransactionLedger
from transaction_analysis.report import render_summary, render_transactions


def test_render_summary_for_scenario():
    text = render_summary(TransactionLedger(scenario_records()))

    assert text.splitlines() == [
        "Transactions: 2",
        "Unique transaction types: credit, debit",
        "Total amount of transactions: 50.00",
        "Average transaction amount: 25.00",
        "Debit transactions: 1 (total 100.00)",
        "Month with most transactions: January",
        "Month with most debit transactions: January",
        "Most frequent transaction type: equal",
    ]


def test_render_summary_for_empty_ledger():
    text = render_summary(TransactionLedger())

    assert "Unique transaction types: none" in text
    assert "Month with most transactions: n/a" in text
    assert "Average transaction amount: 0.00" in text


def test_render_transactions_is_tab_separated():
    records = TransactionLedger(
        [make_tx("7", "2019-03-04", 12.5, "credit", "Cafe", "two\nlines  here")]
    ).get_all_transactions()

    header, row = render_transactions(records).splitlines()

    assert header.split("\t")[0] == "transaction_id"
    assert row.split("\t") == ["7", "2019-03-04", "12.50", "credit", "Cafe", "two lines here"]


def test_render_transactions_empty_has_header_only():
    assert len(render_transactions([]).splitlines()) == 1
