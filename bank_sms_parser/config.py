from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from bank_sms_parser.exceptions import SettingsError
from bank_sms_parser.models import BlockSettings, RegisteredAccount


class AccountEntry(BaseModel):
    last4: str
    name: str | None = None

    @field_validator("last4")
    @classmethod
    def _digits_only(cls, v: str) -> str:
        v = v.strip()
        if not v.isdigit() or not 3 <= len(v) <= 4:
            raise ValueError("last4 must be 3-4 digits")
        return v


class SmsParserSettings(BaseSettings):
    model_config = {"env_prefix": "SMS_PARSER_"}

    blocked_senders: list[str] = []
    blocked_keywords: list[str] = ["loan", "approved", "pre-approved", "offer", "voucher", "points"]
    registered_accounts: list[AccountEntry] = []
    custom_bank_identifiers: list[str] = []
    bank_senders_only: bool = False
    dedup_prefix_chars: int = Field(100, gt=0)
    merchant_max_chars: int = Field(50, gt=0, le=50)
    import_workers: int = Field(8, gt=0)
    import_batch_size: int = Field(100, gt=0)

    def block_settings(self) -> BlockSettings:
        return BlockSettings.from_lists(self.blocked_senders, self.blocked_keywords)

    def accounts(self) -> tuple[RegisteredAccount, ...]:
        return tuple(RegisteredAccount(last4=a.last4, name=a.name) for a in self.registered_accounts)


def get_settings(**overrides) -> SmsParserSettings:
    try:
        return SmsParserSettings(**overrides)
    except ValidationError as e:
        raise SettingsError(f"Invalid sms parser settings: {e}") from e


class _LazySettings:
    _instance: SmsParserSettings | None = None

    def __getattr__(self, name: str):
        if self._instance is None:
            self._instance = get_settings()
        return getattr(self._instance, name)


settings = _LazySettings()
