import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable

from bank_sms_parser.categorizer import categorize
from bank_sms_parser.config import SmsParserSettings, get_settings
from bank_sms_parser.exceptions import BulkImportError, DuplicateTransactionError
from bank_sms_parser.models import ParseResult, RawNotification
from bank_sms_parser.parser import SmsParser
from bank_sms_parser.sender_filter import is_bank_sender
from bank_sms_parser.store import InMemoryTransactionStore, TransactionStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportSummary:
    total: int
    parsed: int
    added: int
    duplicates: int
    internal_transfers: int


class BulkImporter:
    def __init__(
        self,
        parser: SmsParser | None = None,
        store: TransactionStore | None = None,
        settings: SmsParserSettings | None = None,
    ):
        self._settings = settings or get_settings()
        self._parser = parser or SmsParser.from_settings(self._settings)
        self._store = store if store is not None else InMemoryTransactionStore()

    @property
    def store(self) -> TransactionStore:
        return self._store

    def _prefilter(self, notifications: list[RawNotification]) -> list[RawNotification]:
        if not self._settings.bank_senders_only:
            return notifications
        custom = self._settings.custom_bank_identifiers
        kept = [n for n in notifications if is_bank_sender(n.sender_address, custom)]
        logger.info(
            "[BulkImporter] %d/%d messages from bank senders", len(kept), len(notifications)
        )
        return kept

    def _parse_chunk(self, chunk: list[RawNotification]) -> list[ParseResult | None]:
        return [self._parser.parse(n) for n in chunk]

    def run(
        self,
        notifications: Iterable[RawNotification],
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> ImportSummary:
        """Parse a backlog in parallel, then dedup and store in input order.

        progress_callback(processed, total) is called after each chunk.
        """
        notifications = list(notifications)
        total = len(notifications)
        candidates = self._prefilter(notifications)
        batch_size = self._settings.import_batch_size
        chunks = [candidates[i : i + batch_size] for i in range(0, len(candidates), batch_size)]

        logger.info(
            "[BulkImporter] %d messages across %d chunks, %d workers",
            total,
            len(chunks),
            self._settings.import_workers,
        )
        parsed = added = duplicates = internal = 0
        processed = total - len(candidates)
        if progress_callback:
            progress_callback(processed, total)

        with ThreadPoolExecutor(max_workers=self._settings.import_workers) as executor:
            # map() yields chunk results in submission order
            results_iter = executor.map(self._parse_chunk, chunks)
            for chunk in chunks:
                try:
                    results = next(results_iter)
                except Exception as e:
                    logger.warning("[BulkImporter] chunk failed after %d / %d processed: %s", processed, total, e)
                    raise BulkImportError(f"Parsing chunk failed: {e}") from e

                for result in results:
                    if result is None:
                        continue
                    parsed += 1
                    if self._store.has_hash(result.dedup_hash):
                        duplicates += 1
                        continue
                    try:
                        self._store.save(result, categorize(result))
                    except DuplicateTransactionError:
                        # Another importer on the same store saved it after has_hash()
                        logger.debug("[BulkImporter] hash %s saved concurrently", result.dedup_hash)
                        duplicates += 1
                        continue
                    if result.is_internal_transfer:
                        internal += 1
                    added += 1

                processed += len(chunk)
                if progress_callback:
                    progress_callback(processed, total)
                logger.info("[BulkImporter] %d / %d processed", processed, total)

        logger.info(
            "[BulkImporter] import complete: %d parsed, %d added, %d duplicates, %d internal transfers",
            parsed,
            added,
            duplicates,
            internal,
        )
        return ImportSummary(
            total=total,
            parsed=parsed,
            added=added,
            duplicates=duplicates,
            internal_transfers=internal,
        )
