"""Content fingerprints used to drop re-delivered notifications.

Carriers retransmit the same alert, sometimes minutes apart, so the receive
time is left out of the fingerprint. What goes in is the sender,
the parsed amount and the most stable part of the body: the bank's reference
id when one is present, otherwise a normalized prefix of the text.
"""

import hashlib
import re
from decimal import Decimal

from bank_sms_parser.patterns import DEFAULT_PATTERN_TABLE, PatternCategory, PatternTable

DEFAULT_PREFIX_CHARS = 100


def _collapse_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def normalize_for_fingerprint(text: str) -> str:
    return _collapse_whitespace(text).lower()


def stable_identifier(
    body: str,
    table: PatternTable = DEFAULT_PATTERN_TABLE,
    prefix_chars: int = DEFAULT_PREFIX_CHARS,
) -> str:
    reference = table.first_capture(PatternCategory.REFERENCE, body)
    if reference:
        return f"ref:{reference.upper()}"
    return f"text:{normalize_for_fingerprint(body)[:prefix_chars]}"


def canonical_payload(sender_address: str, amount: Decimal, identifier: str) -> str:
    return "\n".join([sender_address.strip().upper(), f"{amount:.2f}", identifier])


def compute_dedup_hash(
    sender_address: str,
    amount: Decimal,
    body: str,
    table: PatternTable = DEFAULT_PATTERN_TABLE,
    prefix_chars: int = DEFAULT_PREFIX_CHARS,
) -> str:
    payload = canonical_payload(sender_address, amount, stable_identifier(body, table, prefix_chars))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
