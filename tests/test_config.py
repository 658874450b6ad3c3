import pytest

from bank_sms_parser.config import SmsParserSettings, get_settings
from bank_sms_parser.exceptions import SettingsError
from bank_sms_parser.models import RegisteredAccount


def test_defaults():
    s = SmsParserSettings()
    assert s.blocked_senders == []
    assert "loan" in s.blocked_keywords
    assert s.registered_accounts == []
    assert s.bank_senders_only is False
    assert s.dedup_prefix_chars == 100
    assert s.merchant_max_chars == 50
    assert s.import_workers == 8
    assert s.import_batch_size == 100


def test_env_override(monkeypatch):
    monkeypatch.setenv("SMS_PARSER_IMPORT_WORKERS", "3")
    monkeypatch.setenv("SMS_PARSER_BLOCKED_SENDERS", '["spambk"]')
    s = get_settings()
    assert s.import_workers == 3
    assert s.block_settings().blocked_senders == frozenset({"SPAMBK"})


def test_accounts():
    s = get_settings(registered_accounts=[{"last4": " 1234 ", "name": "HDFC Savings"}, {"last4": "987"}])
    assert s.accounts() == (
        RegisteredAccount(last4="1234", name="HDFC Savings"),
        RegisteredAccount(last4="987"),
    )


@pytest.mark.parametrize("last4", ["12a4", "12", "12345"])
def test_invalid_account_suffix(last4):
    with pytest.raises(SettingsError):
        get_settings(registered_accounts=[{"last4": last4}])


@pytest.mark.parametrize("field", ["import_workers", "import_batch_size", "dedup_prefix_chars", "merchant_max_chars"])
def test_non_positive_limits_are_rejected(field):
    with pytest.raises(SettingsError):
        get_settings(**{field: 0})


def test_merchant_limit_has_upper_bound():
    assert get_settings(merchant_max_chars=50).merchant_max_chars == 50
    with pytest.raises(SettingsError):
        get_settings(merchant_max_chars=51)
