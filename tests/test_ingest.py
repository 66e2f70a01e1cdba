import pytest

from tests.helpers.records import make_tx, scenario_records, write_json
from transaction_analysis import (
    InvalidTransactionError,
    TransactionDataError,
    TransactionLedger,
    load_transactions_json,
    parse_transactions,
)


def test_load_top_level_array(tmp_path):
    path = write_json(tmp_path / "transactions.json", scenario_records())

    records = load_transactions_json(path)

    assert [r.transaction_id for r in records] == ["1", "2"]
    assert TransactionLedger(records).calculate_total_amount() == 50


def test_load_object_with_transactions_key(tmp_path):
    path = write_json(tmp_path / "transactions.json", {"transactions": scenario_records()})

    assert len(load_transactions_json(str(path))) == 2


def test_load_empty_array(tmp_path):
    path = write_json(tmp_path / "transactions.json", [])

    assert load_transactions_json(path) == []


def test_invalid_json_raises_data_error(tmp_path):
    path = tmp_path / "transactions.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(TransactionDataError, match="invalid JSON"):
        load_transactions_json(path)


def test_non_utf8_bytes_raise_data_error(tmp_path):
    path = tmp_path / "transactions.json"
    path.write_bytes(b'[{"transaction_id": "\xff"}]')

    with pytest.raises(TransactionDataError, match="invalid JSON"):
        load_transactions_json(path)


def test_missing_file_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_transactions_json(tmp_path / "nope.json")


@pytest.mark.parametrize("document", [{"items": []}, "text", 3, {"transactions": {"a": 1}}])
def test_wrong_top_level_shape(document):
    with pytest.raises(TransactionDataError):
        parse_transactions(document)


def test_invalid_record_reports_index():
    bad = make_tx("b")
    del bad["transaction_date"]

    with pytest.raises(InvalidTransactionError) as excinfo:
        parse_transactions([make_tx("a"), make_tx("c"), bad])

    assert excinfo.value.index == 2
    assert "transaction_date" in str(excinfo.value)
