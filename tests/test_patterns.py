import pytest

from bank_sms_parser.exceptions import PatternTableError
from bank_sms_parser.patterns import DEFAULT_PATTERN_TABLE, PatternCategory, PatternTable


def test_default_table_has_every_category():
    for category in PatternCategory:
        rules = DEFAULT_PATTERN_TABLE.rules(category)
        assert isinstance(rules, tuple)
        assert rules
        assert all(r.category is category for r in rules)


def test_default_table_rule_counts():
    assert len(DEFAULT_PATTERN_TABLE.rules(PatternCategory.DEBIT)) == 6
    assert len(DEFAULT_PATTERN_TABLE.rules(PatternCategory.CREDIT)) == 4
    assert len(DEFAULT_PATTERN_TABLE.rules(PatternCategory.ACCOUNT)) == 5
    assert len(DEFAULT_PATTERN_TABLE.rules(PatternCategory.MERCHANT)) == 3
    assert len(DEFAULT_PATTERN_TABLE.rules(PatternCategory.TRANSFER)) == 4
    assert len(DEFAULT_PATTERN_TABLE.rules(PatternCategory.DESTINATION_ACCOUNT)) == 3


def test_table_cannot_be_mutated():
    with pytest.raises(TypeError):
        DEFAULT_PATTERN_TABLE._rules[PatternCategory.DEBIT] = ()


def test_build_rejects_missing_capture_group():
    with pytest.raises(PatternTableError):
        PatternTable.build({PatternCategory.ACCOUNT: [(r"a/c\s*\d{4}", 1)]})


def test_build_rejects_invalid_regex():
    with pytest.raises(PatternTableError):
        PatternTable.build({PatternCategory.MERCHANT: [(r"at\s+(", 1)]})


def test_missing_categories_are_empty():
    table = PatternTable.build({PatternCategory.DEBIT: [(r"spent\s+(\d+)", 1)]})
    assert table.rules(PatternCategory.CREDIT) == ()
    assert table.first_capture(PatternCategory.CREDIT, "credited 100") is None
    assert table.any_match(PatternCategory.TRANSFER, "NEFT transfer") is False


def test_first_capture_follows_rule_order_not_position():
    table = PatternTable.build(
        {
            PatternCategory.DEBIT: [
                (r"second\s+(\d+)", 1),
                (r"first\s+(\d+)", 1),
            ]
        }
    )
    # "first" appears earlier in the text, but the rule listed first wins
    assert table.first_capture(PatternCategory.DEBIT, "first 10 then second 20") == "20"


def test_first_capture_skips_empty_capture():
    table = PatternTable.build(
        {
            PatternCategory.MERCHANT: [
                (r"at\s*([A-Z]*)\.", 1),
                (r"via\s+([A-Z]+)", 1),
            ]
        },
        flags=0,
    )
    assert table.first_capture(PatternCategory.MERCHANT, "at . via HDFC") == "HDFC"


def test_transfer_rules_match_without_capture():
    assert DEFAULT_PATTERN_TABLE.any_match(PatternCategory.TRANSFER, "Funds sent by RTGS")
    assert DEFAULT_PATTERN_TABLE.any_match(PatternCategory.TRANSFER, "moved between accounts")
    assert not DEFAULT_PATTERN_TABLE.any_match(PatternCategory.TRANSFER, "Rs 500 spent at ZOMATO")


def test_reference_requires_a_digit():
    assert DEFAULT_PATTERN_TABLE.first_capture(PatternCategory.REFERENCE, "transaction amount Rs 100") is None
    assert DEFAULT_PATTERN_TABLE.first_capture(PatternCategory.REFERENCE, "UPI Ref: 12345678.") == "12345678"
    assert DEFAULT_PATTERN_TABLE.first_capture(PatternCategory.REFERENCE, "Txn ID: 998877.") == "998877"
    assert DEFAULT_PATTERN_TABLE.first_capture(PatternCategory.REFERENCE, "Ref No. AB12CD34") == "AB12CD34"
