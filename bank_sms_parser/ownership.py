import re
from typing import Iterable

from bank_sms_parser.models import OwnershipMatch, RegisteredAccount

_NON_DIGIT_RE = re.compile(r"\D")

# Fewer digits than this say nothing about which account was used
MIN_NAME_MATCH_DIGITS = 3


def _digits(suffix: str | None) -> str:
    if not suffix:
        return ""
    return _NON_DIGIT_RE.sub("", suffix)


def suffix_matches(extracted: str | None, registered_last4: str) -> bool:
    """Symmetric suffix test so partial captures ("123" vs "1234") still match."""
    left = _digits(extracted)
    right = _digits(registered_last4)
    if not left or not right:
        return False
    return left.endswith(right) or right.endswith(left)


def is_own_account(suffix: str | None, accounts: Iterable[RegisteredAccount]) -> bool:
    return any(suffix_matches(suffix, a.last4) for a in accounts)


def match_ownership(
    account_suffix: str | None,
    destination_account_suffix: str | None,
    accounts: Iterable[RegisteredAccount],
) -> OwnershipMatch:
    accounts = list(accounts)
    return OwnershipMatch(
        source_is_own=is_own_account(account_suffix, accounts),
        destination_is_own=is_own_account(destination_account_suffix, accounts),
    )


def match_account_name(suffix: str | None, accounts: Iterable[RegisteredAccount]) -> str | None:
    if len(_digits(suffix)) < MIN_NAME_MATCH_DIGITS:
        return None
    for account in accounts:
        if account.name and suffix_matches(suffix, account.last4):
            return account.name
    return None
