import re
from typing import Mapping

from bank_sms_parser.models import Direction, ParseResult

FOOD = "Food"
TRANSPORT = "Transport"
BILLS = "Bills"
INCOME = "Income"
UNCATEGORIZED = "Uncategorized"

ALL_CATEGORIES = [FOOD, TRANSPORT, BILLS, INCOME, UNCATEGORIZED]

# (category, text_re, merchant_re)
# Rule fires if ANY provided pattern matches; first match wins (highest priority first)
_RULES: list[tuple[str, str | None, str | None]] = [
    (FOOD, r"zomato|swiggy|food", r"zomato|swiggy|dominos|mcdonald|restaurant|cafe"),
    (TRANSPORT, r"uber|\bola\b|travel", r"uber|\bola\b|rapido|irctc|metro"),
    (BILLS, r"\bbills?\b|recharge|electricity", r"electricity|broadband|airtel|jio|bescom"),
]

_COMPILED: list[tuple[str, re.Pattern | None, re.Pattern | None]] = [
    (
        cat,
        re.compile(text, re.IGNORECASE) if text else None,
        re.compile(merchant, re.IGNORECASE) if merchant else None,
    )
    for cat, text, merchant in _RULES
]


def categorize(result: ParseResult, overrides: Mapping[str, str] | None = None) -> str:
    if overrides and result.merchant in overrides:
        return overrides[result.merchant]

    if result.direction is Direction.CREDIT:
        return INCOME

    for cat, text_re, merchant_re in _COMPILED:
        if text_re and text_re.search(result.original_text):
            return cat
        if merchant_re and merchant_re.search(result.merchant):
            return cat

    return UNCATEGORIZED
