from dataclasses import dataclass

from bank_sms_parser.models import UNKNOWN_ACCOUNT, UNKNOWN_MERCHANT
from bank_sms_parser.patterns import DEFAULT_PATTERN_TABLE, PatternCategory, PatternTable

UPI_MERCHANT = "UPI Transaction"
MERCHANT_MAX_CHARS = 50


@dataclass(frozen=True)
class TransferInfo:
    is_self_transfer: bool
    destination_account_suffix: str | None = None


def extract_account(body: str, table: PatternTable = DEFAULT_PATTERN_TABLE) -> str:
    return table.first_capture(PatternCategory.ACCOUNT, body) or UNKNOWN_ACCOUNT


def normalize_merchant(raw: str, max_chars: int = MERCHANT_MAX_CHARS) -> str:
    merchant = raw.strip()
    if not merchant:
        return UNKNOWN_MERCHANT
    # VPA-style payees ("x@upi", "AMAZON PAY@UPI") collapse to one label
    if "upi" in merchant.lower():
        merchant = UPI_MERCHANT
    limit = min(max_chars, MERCHANT_MAX_CHARS)
    if len(merchant) > limit:
        merchant = merchant[:limit] + "..."
    return merchant


def extract_merchant(
    body: str,
    table: PatternTable = DEFAULT_PATTERN_TABLE,
    max_chars: int = MERCHANT_MAX_CHARS,
) -> str:
    raw = table.first_capture(PatternCategory.MERCHANT, body)
    if raw is None:
        return UNKNOWN_MERCHANT
    return normalize_merchant(raw, max_chars)


def detect_transfer(body: str, table: PatternTable = DEFAULT_PATTERN_TABLE) -> TransferInfo:
    if not table.any_match(PatternCategory.TRANSFER, body):
        return TransferInfo(is_self_transfer=False)
    return TransferInfo(
        is_self_transfer=True,
        destination_account_suffix=table.first_capture(PatternCategory.DESTINATION_ACCOUNT, body),
    )
