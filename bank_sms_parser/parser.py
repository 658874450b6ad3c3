"""Single-message parse: raw notification in, ParseResult or None out.

The steps run in a fixed order and each one may end the pass:

1) empty input
2) sender / keyword blocklist
3) debit-then-credit amount cascade
4) account, merchant and transfer extraction
5) ownership matching (transfers only)
6) amount and declined/failed guards
7) dedup fingerprint

A rejection is an ordinary outcome and is returned as None. parse() does not
raise for string input; a missed transaction can be added by hand later, a
spurious one silently lands in the user's books.
"""

import logging
from datetime import datetime
from typing import Iterable

from bank_sms_parser.classifier import classify
from bank_sms_parser.dedup import DEFAULT_PREFIX_CHARS, compute_dedup_hash
from bank_sms_parser.extractors import (
    MERCHANT_MAX_CHARS,
    detect_transfer,
    extract_account,
    extract_merchant,
)
from bank_sms_parser.models import BlockSettings, ParseResult, RawNotification, RegisteredAccount
from bank_sms_parser.ownership import match_account_name, match_ownership
from bank_sms_parser.patterns import DEFAULT_PATTERN_TABLE, PatternTable
from bank_sms_parser.sender_filter import has_blocked_keyword, is_blocked_sender

logger = logging.getLogger(__name__)

REJECTION_MARKERS = ("declined", "failed")


class SmsParser:
    def __init__(
        self,
        table: PatternTable = DEFAULT_PATTERN_TABLE,
        block_settings: BlockSettings | None = None,
        accounts: Iterable[RegisteredAccount] = (),
        merchant_max_chars: int = MERCHANT_MAX_CHARS,
        dedup_prefix_chars: int = DEFAULT_PREFIX_CHARS,
    ):
        self._table = table
        self._block = block_settings or BlockSettings()
        self._accounts = tuple(accounts)
        self._merchant_max_chars = merchant_max_chars
        self._dedup_prefix_chars = dedup_prefix_chars

    @classmethod
    def from_settings(cls, settings, table: PatternTable = DEFAULT_PATTERN_TABLE) -> "SmsParser":
        return cls(
            table=table,
            block_settings=settings.block_settings(),
            accounts=settings.accounts(),
            merchant_max_chars=settings.merchant_max_chars,
            dedup_prefix_chars=settings.dedup_prefix_chars,
        )

    def parse(self, notification: RawNotification) -> ParseResult | None:
        return self.parse_text(notification.sender_address, notification.body, notification.received_at)

    def parse_text(
        self,
        sender_address: str | None,
        body: str | None,
        received_at: datetime,
        block_settings: BlockSettings | None = None,
        accounts: Iterable[RegisteredAccount] | None = None,
    ) -> ParseResult | None:
        if not sender_address or not sender_address.strip() or not body or not body.strip():
            return None

        block = block_settings if block_settings is not None else self._block
        if is_blocked_sender(sender_address, block):
            logger.debug("[SmsParser] rejected %s: blocked sender", sender_address)
            return None
        if has_blocked_keyword(body, block):
            logger.debug("[SmsParser] rejected %s: blocked keyword", sender_address)
            return None

        classification = classify(body, self._table)
        if classification is None:
            logger.debug("[SmsParser] rejected %s: no amount pattern", sender_address)
            return None

        account = extract_account(body, self._table)
        merchant = extract_merchant(body, self._table, self._merchant_max_chars)
        transfer = detect_transfer(body, self._table)

        registry = self._accounts if accounts is None else tuple(accounts)
        ownership = None
        if transfer.is_self_transfer and registry:
            ownership = match_ownership(account, transfer.destination_account_suffix, registry)

        amount = classification.amount
        if amount is None or amount <= 0:
            logger.debug(
                "[SmsParser] rejected %s: invalid amount %r", sender_address, classification.raw_amount
            )
            return None

        lowered = body.lower()
        if any(marker in lowered for marker in REJECTION_MARKERS):
            logger.debug("[SmsParser] rejected %s: declined/failed transaction", sender_address)
            return None

        return ParseResult(
            amount=amount,
            direction=classification.direction,
            original_text=body,
            timestamp=received_at,
            dedup_hash=compute_dedup_hash(
                sender_address, amount, body, self._table, self._dedup_prefix_chars
            ),
            account_suffix=account,
            merchant=merchant,
            is_self_transfer=transfer.is_self_transfer,
            destination_account_suffix=transfer.destination_account_suffix,
            account_name=match_account_name(account, registry),
            ownership=ownership,
        )


_default_parser = SmsParser()


def parse_notification(
    sender_address: str | None,
    body: str | None,
    received_at: datetime,
    block_settings: BlockSettings | None = None,
    accounts: Iterable[RegisteredAccount] | None = None,
) -> ParseResult | None:
    return _default_parser.parse_text(sender_address, body, received_at, block_settings, accounts)
