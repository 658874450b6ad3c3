from datetime import UTC, datetime

import pytest

from bank_sms_parser.models import RawNotification, RegisteredAccount
from bank_sms_parser.parser import SmsParser

HDFC_ZOMATO = "Rs. 1500.00 debited from a/c 1234 on 12-02-26 to ZOMATO. UPI Ref: 12345678."
ICICI_IMPS = "Rs 5000 debited from a/c 1234 IMPS transfer to a/c 9876"
AMAZON_PAY_BILL = "Paid Rs. 2000.00 for electricity bill via Amazon Pay. Txn ID: 998877."
SBI_UPI = "Dear User, INR 450.00 debited from A/c X6789 via UPI for UBER RIDES."
SALARY = "Rs. 50000.00 credited to a/c 1234 on 30-01-26. Salary for Jan."


@pytest.fixture
def received_at():
    return datetime(2026, 2, 12, 10, 30, tzinfo=UTC)


@pytest.fixture
def parser():
    return SmsParser()


@pytest.fixture
def own_accounts():
    return [
        RegisteredAccount(last4="1234", name="HDFC Savings"),
        RegisteredAccount(last4="9876", name="ICICI Salary"),
    ]


@pytest.fixture
def make_notification(received_at):
    def _make(sender: str, body: str, at: datetime | None = None) -> RawNotification:
        return RawNotification(sender_address=sender, body=body, received_at=at or received_at)

    return _make
