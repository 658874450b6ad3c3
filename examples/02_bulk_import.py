"""
Import a backlog of SMS from a CSV export and print totals.

The CSV needs the columns: sender, body, received_at (ISO 8601).

Usage:
    poetry run python examples/02_bulk_import.py inbox.csv
    poetry run python examples/02_bulk_import.py inbox.csv --bank-only
    poetry run python examples/02_bulk_import.py inbox.csv --workers 4 --batch 500

Registered accounts and blocklists come from SMS_PARSER_* environment variables.
"""
import argparse
import csv
import logging
from collections import Counter
from datetime import datetime

from bank_sms_parser import BulkImporter, Direction, RawNotification, get_settings

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")


def load_csv(path: str) -> list[RawNotification]:
    with open(path, newline="", encoding="utf-8") as f:
        return [
            RawNotification(
                sender_address=row["sender"],
                body=row["body"],
                received_at=datetime.fromisoformat(row["received_at"]),
            )
            for row in csv.DictReader(f)
        ]


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Bulk import bank SMS from CSV")
    parser.add_argument("path", type=str, help="CSV file with sender, body, received_at columns")
    parser.add_argument("--bank-only", action="store_true", help="Skip senders that do not look like banks")
    parser.add_argument("--workers", type=int, help="Parser threads")
    parser.add_argument("--batch", type=int, help="Messages per chunk")
    args = parser.parse_args()

    overrides = {"bank_senders_only": True} if args.bank_only else {}
    if args.workers:
        overrides["import_workers"] = args.workers
    if args.batch:
        overrides["import_batch_size"] = args.batch

    notifications = load_csv(args.path)
    importer = BulkImporter(settings=get_settings(**overrides))
    summary = importer.run(notifications, progress_callback=lambda done, total: print(f"  {done}/{total}"))

    print(f"\nRead {summary.total}, parsed {summary.parsed}, added {summary.added}, "
          f"skipped {summary.duplicates} duplicates, {summary.internal_transfers} internal transfers")

    totals = importer.store.totals()
    print(f"Spent:    {totals[Direction.DEBIT]:>12.2f}")
    print(f"Received: {totals[Direction.CREDIT]:>12.2f}")

    print("\n--- By Category ---")
    by_category = Counter(r.category for r in importer.store.all())
    for category, count in by_category.most_common():
        print(f"  {count:>4}  {category}")
