"""
Parse a single bank notification.

Usage:
    poetry run python examples/01_parse.py HDFCBK "Rs. 1500.00 debited from a/c 1234 on 12-02-26 to ZOMATO. UPI Ref: 12345678."
    poetry run python examples/01_parse.py ICICI "Rs 5000 debited from a/c 1234 IMPS transfer to a/c 9876" --account 1234 --account 9876
"""
import argparse
import logging
from datetime import UTC, datetime

from bank_sms_parser import RegisteredAccount, SmsParser, categorize, get_settings

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s | %(message)s")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Parse one bank SMS")
    parser.add_argument("sender", type=str, help="Sender address, e.g. VM-HDFCBK")
    parser.add_argument("body", type=str, help="Message text")
    parser.add_argument("--account", action="append", default=[], help="Last digits of one of your accounts (repeatable)")
    args = parser.parse_args()

    sms_parser = SmsParser.from_settings(get_settings())
    accounts = [RegisteredAccount(last4=a) for a in args.account] or None
    result = sms_parser.parse_text(args.sender, args.body, datetime.now(UTC), accounts=accounts)

    if result is None:
        print("Not a transaction")
    else:
        print(f"Direction:   {result.direction.value}")
        print(f"Amount:      {result.amount}")
        print(f"Account:     {result.account_suffix}")
        print(f"Merchant:    {result.merchant}")
        print(f"Category:    {categorize(result)}")
        print(f"Transfer:    {result.is_self_transfer} (to {result.destination_account_suffix})")
        print(f"Internal:    {result.is_internal_transfer}")
        print(f"Hash:        {result.dedup_hash}")
