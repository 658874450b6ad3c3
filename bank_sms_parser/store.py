import logging
import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol
from uuid import uuid4

from bank_sms_parser.exceptions import DuplicateTransactionError
from bank_sms_parser.models import Direction, ParseResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredTransaction:
    id: str
    result: ParseResult
    category: str
    # Transfers between two of the user's own accounts are kept but not totalled
    counts_toward_totals: bool


class TransactionStore(Protocol):
    def has_hash(self, dedup_hash: str) -> bool:
        ...

    def save(self, result: ParseResult, category: str) -> StoredTransaction:
        ...


class InMemoryTransactionStore:
    def __init__(self):
        self._by_hash: dict[str, StoredTransaction] = {}
        self._lock = threading.Lock()
        logger.info("[InMemoryTransactionStore] initialized")

    # --- Dedup ---

    def has_hash(self, dedup_hash: str) -> bool:
        with self._lock:
            return dedup_hash in self._by_hash

    def get_existing_hashes(self, hashes: list[str]) -> set[str]:
        with self._lock:
            return {h for h in hashes if h in self._by_hash}

    # --- Transactions ---

    def save(self, result: ParseResult, category: str) -> StoredTransaction:
        record = StoredTransaction(
            id=str(uuid4()),
            result=result,
            category=category,
            counts_toward_totals=not result.is_internal_transfer,
        )
        with self._lock:
            if result.dedup_hash in self._by_hash:
                raise DuplicateTransactionError(f"Duplicate transaction hash {result.dedup_hash}")
            self._by_hash[result.dedup_hash] = record
        return record

    def get(self, dedup_hash: str) -> StoredTransaction | None:
        with self._lock:
            return self._by_hash.get(dedup_hash)

    def all(self) -> list[StoredTransaction]:
        with self._lock:
            return list(self._by_hash.values())

    def count(self) -> int:
        with self._lock:
            return len(self._by_hash)

    def totals(self) -> dict[Direction, Decimal]:
        sums = {Direction.DEBIT: Decimal("0"), Direction.CREDIT: Decimal("0")}
        for record in self.all():
            if record.counts_toward_totals:
                sums[record.result.direction] += record.result.amount
        return sums
