from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from bank_sms_parser.models import Direction
from bank_sms_parser.patterns import DEFAULT_PATTERN_TABLE, PatternCategory, PatternTable

# Debit rules are consulted before credit rules; a debit match is final.
_DIRECTION_ORDER: tuple[tuple[PatternCategory, Direction], ...] = (
    (PatternCategory.DEBIT, Direction.DEBIT),
    (PatternCategory.CREDIT, Direction.CREDIT),
)


@dataclass(frozen=True)
class Classification:
    direction: Direction
    raw_amount: str
    # None when the captured text is not a number
    amount: Decimal | None


def parse_amount(raw: str) -> Decimal | None:
    cleaned = raw.replace(",", "")
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return None
    return amount if amount.is_finite() else None


def classify(body: str, table: PatternTable = DEFAULT_PATTERN_TABLE) -> Classification | None:
    for category, direction in _DIRECTION_ORDER:
        raw = table.first_capture(category, body)
        if raw:
            return Classification(direction=direction, raw_amount=raw, amount=parse_amount(raw))
    return None
