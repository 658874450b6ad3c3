from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

UNKNOWN_ACCOUNT = "Unknown"
UNKNOWN_MERCHANT = "Unknown Merchant"


class Direction(str, Enum):
    DEBIT = "debit"
    CREDIT = "credit"


@dataclass(frozen=True)
class RawNotification:
    sender_address: str
    body: str
    received_at: datetime


@dataclass(frozen=True)
class BlockSettings:
    """User blocklist snapshot. Senders match uppercased, keywords lowercased."""

    blocked_senders: frozenset[str] = frozenset()
    blocked_keywords: frozenset[str] = frozenset()

    @classmethod
    def from_lists(cls, senders=(), keywords=()) -> "BlockSettings":
        return cls(
            blocked_senders=frozenset(s.strip().upper() for s in senders if s and s.strip()),
            blocked_keywords=frozenset(k.strip().lower() for k in keywords if k and k.strip()),
        )


@dataclass(frozen=True)
class RegisteredAccount:
    last4: str
    name: str | None = None


@dataclass(frozen=True)
class OwnershipMatch:
    source_is_own: bool
    destination_is_own: bool

    @property
    def is_internal(self) -> bool:
        # Money moving between two of the user's own accounts
        return self.source_is_own and self.destination_is_own


@dataclass(frozen=True)
class ParseResult:
    amount: Decimal
    direction: Direction
    original_text: str
    timestamp: datetime
    dedup_hash: str
    account_suffix: str = UNKNOWN_ACCOUNT
    merchant: str = UNKNOWN_MERCHANT
    is_self_transfer: bool = False
    destination_account_suffix: str | None = None
    account_name: str | None = None
    ownership: OwnershipMatch | None = None

    @property
    def is_internal_transfer(self) -> bool:
        return self.ownership is not None and self.ownership.is_internal
