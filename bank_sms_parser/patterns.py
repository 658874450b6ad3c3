"""Ordered pattern cascades for bank notification text.

Every category holds an ordered tuple of rules. Order is priority: the first
rule whose regex matches with a non-empty capture decides the outcome, and no
later rule is consulted even if it would capture something different. Adding
a rule in the middle of a list changes behaviour for every message it
overlaps with, so new rules go at the end unless a test pins the new order.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from bank_sms_parser.exceptions import PatternTableError


class PatternCategory(str, Enum):
    DEBIT = "debit"
    CREDIT = "credit"
    ACCOUNT = "account"
    MERCHANT = "merchant"
    TRANSFER = "transfer"
    DESTINATION_ACCOUNT = "destination_account"
    REFERENCE = "reference"


@dataclass(frozen=True)
class PatternRule:
    regex: re.Pattern
    group: int
    category: PatternCategory

    def capture(self, text: str) -> str | None:
        m = self.regex.search(text)
        if not m:
            return None
        return m.group(self.group) or None


@dataclass(frozen=True)
class PatternTable:
    _rules: Mapping[PatternCategory, tuple[PatternRule, ...]] = field(repr=False)

    @classmethod
    def build(
        cls,
        definitions: Mapping[PatternCategory, list[tuple[str, int]]],
        flags: int = re.IGNORECASE,
    ) -> "PatternTable":
        compiled: dict[PatternCategory, tuple[PatternRule, ...]] = {}
        for category in PatternCategory:
            rules = []
            for raw, group in definitions.get(category, []):
                try:
                    regex = re.compile(raw, flags)
                except re.error as e:
                    raise PatternTableError(f"Invalid {category.value} pattern {raw!r}: {e}") from e
                if group < 0 or group > regex.groups:
                    raise PatternTableError(
                        f"{category.value} pattern {raw!r} has no capture group {group}"
                    )
                rules.append(PatternRule(regex=regex, group=group, category=category))
            compiled[category] = tuple(rules)
        return cls(MappingProxyType(compiled))

    def rules(self, category: PatternCategory) -> tuple[PatternRule, ...]:
        return self._rules[category]

    def first_capture(self, category: PatternCategory, text: str) -> str | None:
        for rule in self._rules[category]:
            value = rule.capture(text)
            if value:
                return value
        return None

    def any_match(self, category: PatternCategory, text: str) -> bool:
        return any(rule.regex.search(text) for rule in self._rules[category])


_CUR = r"(?:rs\.?|inr|usd|\$)"
_AMT = r"([\d,]+\.?\d*)"
# Leading digits of an unmasked number are skipped so the capture is the tail
_LEAD = r"(?:[xX]*\d+(?=\d{4}(?!\d)))?"
_SUFFIX = rf"{_LEAD}([xX]*\d{{3,4}})(?!\d)"
_NAME = r"([a-zA-Z0-9\s.@]+?)"

_DEFAULT_RULES: dict[PatternCategory, list[tuple[str, int]]] = {
    PatternCategory.DEBIT: [
        (rf"{_CUR}\s*{_AMT}\s*(?:debited|spent|paid|withdrawn|deducted|sent|transferred)", 1),
        (rf"(?:debited|spent|paid|withdrawn|deducted|sent|transferred)\s*(?:by|to|of)?\s*{_CUR}?\s*{_AMT}", 1),
        (rf"(?:payment|purchase)\s*(?:of)?\s*{_CUR}\s*{_AMT}", 1),
        # EMI phrasing is shadowed by the first rule when the currency precedes the amount
        (rf"(?:emi)\s*(?:of)?\s*{_CUR}?\s*{_AMT}\s*(?:debited|deducted|paid)", 1),
        (rf"(?:atm)\s*(?:withdrawal|withdrawn)?\s*(?:of)?\s*{_CUR}?\s*{_AMT}", 1),
        (rf"{_CUR}\s*{_AMT}\s*(?:was|has been)\s*(?:debited|deducted)", 1),
    ],
    PatternCategory.CREDIT: [
        (rf"{_CUR}\s*{_AMT}\s*(?:credited|received|deposited|added|refunded|reversed)", 1),
        (rf"(?:credited|received|deposited|added|refunded|reversed)\s*(?:by|to|of)?\s*{_CUR}?\s*{_AMT}", 1),
        (rf"(?:cashback|refund|reversal)\s*(?:of)?\s*{_CUR}?\s*{_AMT}", 1),
        (rf"{_CUR}\s*{_AMT}\s*(?:was|has been)\s*(?:credited|deposited|reversed)", 1),
    ],
    PatternCategory.ACCOUNT: [
        (rf"(?:a/c|ac|account)\s*(?:no\.?)?\s*{_SUFFIX}", 1),
        (rf"(?:ending|ending with|end)\s*{_SUFFIX}", 1),
        (rf"(?:card)\s*(?:no\.?)?\s*(?:ending\s*)?{_LEAD}([xX]*\d{{4}})(?!\d)", 1),
        (rf"(?:from)\s*{_SUFFIX}", 1),
        (r"(?:xx)\d*?(\d{3,4})(?!\d)", 1),
    ],
    # A name stops at a stop word, at a sentence-ending period or at the end of the text
    PatternCategory.MERCHANT: [
        (rf"(?:\b(?:at|to|via)|@)\s+{_NAME}(?:\s+(?:on|for|using|ref|txn|via)\b|\.\s|[.\s]*$)", 1),
        (rf"(?:info:\s*){_NAME}(?:\s+(?:on|ref)\b|\.\s|[.\s]*$)", 1),
        (rf"(?:trf\s+to|paid to|sent to)\s+{_NAME}(?:\s+(?:on|ref|via)\b|\.\s|[.\s]*$)", 1),
    ],
    PatternCategory.TRANSFER: [
        (r"(?:neft|imps|rtgs|upi)\s*(?:transfer|trf)?", 0),
        (r"(?:transferred|transfer)\s*(?:to|from)\s*(?:a/c|ac|account|self)", 0),
        (r"(?:fund\s*transfer|self\s*transfer)", 0),
        (r"(?:your own|own account|between accounts)", 0),
    ],
    PatternCategory.DESTINATION_ACCOUNT: [
        (rf"(?:to|towards)\s*(?:a/c|ac|account)\s*(?:no\.?)?\s*{_SUFFIX}", 1),
        (rf"(?:beneficiary|credit)\s*(?:a/c|ac|account)?\s*(?:no\.?)?\s*{_SUFFIX}", 1),
        (r"(?:to)\s*(?:xx)\d*?(\d{3,4})(?!\d)", 1),
    ],
    # Reference ids must contain a digit so words like "amount" are never taken
    PatternCategory.REFERENCE: [
        (r"upi\s*ref(?:\s*no)?\.?[:\s]*((?=[a-z]*\d)[a-z0-9]{6,})", 1),
        (r"(?:txn|transaction)\s*(?:id|no|ref)?\.?[:\s]*((?=[a-z]*\d)[a-z0-9]{6,})", 1),
        (r"ref(?:erence)?(?:\s*(?:no|number))?\.?[:\s]*((?=[a-z]*\d)[a-z0-9]{6,})", 1),
    ],
}

DEFAULT_PATTERN_TABLE = PatternTable.build(_DEFAULT_RULES)
