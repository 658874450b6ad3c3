import re

from bank_sms_parser.models import BlockSettings

# Telecom carriers, government broadcasts and generic OTP/promo prefixes
IGNORED_SENDERS = (
    "VODA", "JIO", "AIRTEL", "BSNL", "IDEA", "TRAI", "GOVT", "OFFER", "PROMO",
    "OTP", "ALERT", "INFO", "VERIFY", "AD-",
)

BANK_IDENTIFIERS = (
    "BK", "BNK", "SBI", "HDFC", "ICICI", "AXIS", "KOTAK", "PAYTM",
    "GPAY", "AMZ", "BOB", "PNB", "UBI", "CITI", "YES", "IDBI",
    "INDUS", "RBL", "FEDERAL", "CANARA", "UNION", "BAJAJ",
)

_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")
_SHORT_CODE_RE = re.compile(r"^\d{5,6}$")


def is_blocked_sender(address: str, block: BlockSettings | None = None) -> bool:
    upper = address.upper()
    if any(marker in upper for marker in IGNORED_SENDERS):
        return True
    if block and any(s and s.upper() in upper for s in block.blocked_senders):
        return True
    return False


def has_blocked_keyword(body: str, block: BlockSettings | None = None) -> bool:
    if not block or not block.blocked_keywords:
        return False
    lowered = body.lower()
    return any(k and k.lower() in lowered for k in block.blocked_keywords)


def is_rejected(address: str, body: str, block: BlockSettings | None = None) -> bool:
    """Cheap pre-check run before any pattern work."""
    return is_blocked_sender(address, block) or has_blocked_keyword(body, block)


def is_bank_sender(address: str, custom_identifiers: tuple[str, ...] | list[str] = ()) -> bool:
    if not address:
        return False

    identifiers = set(BANK_IDENTIFIERS)
    identifiers.update(i.upper() for i in custom_identifiers if i)

    clean = _NON_ALNUM_RE.sub("", address).upper()

    # Alphanumeric headers like AD-HDFCBK / VM-SBIINB
    if 5 <= len(clean) <= 12:
        if any(i in clean for i in identifiers):
            return True

    # 5-6 digit short codes are almost always transactional
    return bool(_SHORT_CODE_RE.match(clean))
