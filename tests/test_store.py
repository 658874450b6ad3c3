from decimal import Decimal

import pytest

from bank_sms_parser.exceptions import StoreError
from bank_sms_parser.models import Direction
from bank_sms_parser.parser import SmsParser
from bank_sms_parser.store import InMemoryTransactionStore

from conftest import AMAZON_PAY_BILL, HDFC_ZOMATO, ICICI_IMPS, SALARY


@pytest.fixture
def store():
    return InMemoryTransactionStore()


def test_save_and_get(store, parser, received_at):
    result = parser.parse_text("HDFCBK", HDFC_ZOMATO, received_at)
    record = store.save(result, "Food")
    assert record.id
    assert record.category == "Food"
    assert record.counts_toward_totals
    assert store.has_hash(result.dedup_hash)
    assert store.get(result.dedup_hash) == record
    assert store.count() == 1


def test_duplicate_hash_raises(store, parser, received_at):
    result = parser.parse_text("HDFCBK", HDFC_ZOMATO, received_at)
    store.save(result, "Food")
    with pytest.raises(StoreError):
        store.save(result, "Food")
    assert store.count() == 1


def test_get_existing_hashes(store, parser, received_at):
    result = parser.parse_text("HDFCBK", HDFC_ZOMATO, received_at)
    store.save(result, "Food")
    assert store.get_existing_hashes([result.dedup_hash, "missing"]) == {result.dedup_hash}


def test_missing_hash(store):
    assert not store.has_hash("missing")
    assert store.get("missing") is None
    assert store.all() == []


def test_internal_transfers_are_excluded_from_totals(store, received_at, own_accounts):
    parser = SmsParser(accounts=own_accounts)
    for sender, body in [("HDFCBK", HDFC_ZOMATO), ("ICICI", ICICI_IMPS), ("AMZPAY", AMAZON_PAY_BILL), ("HDFCBK", SALARY)]:
        result = parser.parse_text(sender, body, received_at)
        store.save(result, "Uncategorized")

    internal = [r for r in store.all() if not r.counts_toward_totals]
    assert len(internal) == 1
    assert internal[0].result.original_text == ICICI_IMPS

    totals = store.totals()
    assert totals[Direction.DEBIT] == Decimal("3500.00")
    assert totals[Direction.CREDIT] == Decimal("50000.00")
