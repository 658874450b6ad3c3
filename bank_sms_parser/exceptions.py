class SmsParserError(Exception):
    pass


class PatternTableError(SmsParserError):
    pass


class SettingsError(SmsParserError):
    pass


class StoreError(SmsParserError):
    pass


class BulkImportError(SmsParserError):
    pass


class DuplicateTransactionError(StoreError):
    pass
