from bank_sms_parser.categorizer import categorize
from bank_sms_parser.config import SmsParserSettings, get_settings, settings
from bank_sms_parser.dedup import compute_dedup_hash
from bank_sms_parser.exceptions import (
    BulkImportError,
    DuplicateTransactionError,
    PatternTableError,
    SettingsError,
    SmsParserError,
    StoreError,
)
from bank_sms_parser.ingestion import BulkImporter, ImportSummary
from bank_sms_parser.models import (
    BlockSettings,
    Direction,
    OwnershipMatch,
    ParseResult,
    RawNotification,
    RegisteredAccount,
)
from bank_sms_parser.ownership import match_ownership
from bank_sms_parser.parser import SmsParser, parse_notification
from bank_sms_parser.patterns import DEFAULT_PATTERN_TABLE, PatternCategory, PatternRule, PatternTable
from bank_sms_parser.sender_filter import is_bank_sender
from bank_sms_parser.store import InMemoryTransactionStore, StoredTransaction, TransactionStore

__all__ = [
    "SmsParser",
    "parse_notification",
    "SmsParserSettings",
    "get_settings",
    "settings",
    "RawNotification",
    "ParseResult",
    "Direction",
    "BlockSettings",
    "RegisteredAccount",
    "OwnershipMatch",
    "PatternTable",
    "PatternRule",
    "PatternCategory",
    "DEFAULT_PATTERN_TABLE",
    "compute_dedup_hash",
    "match_ownership",
    "is_bank_sender",
    "categorize",
    "BulkImporter",
    "ImportSummary",
    "TransactionStore",
    "InMemoryTransactionStore",
    "StoredTransaction",
    "SmsParserError",
    "PatternTableError",
    "SettingsError",
    "StoreError",
    "DuplicateTransactionError",
    "BulkImportError",
]
