#!/usr/bin/env python3
"""
Address Book Loader

Loads an address book file the same way the application does and prints what
it contains, or the first error that stopped the load.

Usage:
    python scripts/load_address_book.py
    python scripts/load_address_book.py data/addressbook.json
    python scripts/load_address_book.py data/addressbook.json --skip-invalid
    python scripts/load_address_book.py data/addressbook.json --json

Arguments:
    file_path: Path to the address book JSON file (default: $ADDRESS_BOOK_FILE)
    --skip-invalid: Leave out invalid plan records instead of failing
    --json: Output the loaded book as JSON
"""
import argparse
import json
import os
import sys
from dataclasses import replace

from dotenv import load_dotenv

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

load_dotenv()

from domain.config import get_storage_config
from domain.entities import AddressBook
from domain.exceptions import DataLoadingError
from application.service.load_address_book import LoadAddressBookService
from infrastructure.logging.logging_adapter import LoggingAdapter
from infrastructure.storage import JsonAddressBookStorage, PersonRecordAdapter, PlanRecordAdapter


def format_book(book: AddressBook) -> str:
    """Format the address book for human-readable output."""
    lines = []
    persons = book.list_contacts()
    plans = sorted(book.list_plans(), key=lambda p: p.plan_date_time.value)

    lines.append("=" * 60)
    lines.append(f"ADDRESS BOOK: {len(persons)} contacts, {len(plans)} plans")
    lines.append("=" * 60)

    lines.append("\n--- Contacts ---")
    for person in persons:
        lines.append(f"  {person.name}")

    lines.append("\n--- Plans ---")
    if not plans:
        lines.append("  (none)")
    for plan in plans:
        lines.append(f"  {plan.plan_date_time}  {plan.plan_name}  with {plan.friend.name}")

    return "\n".join(lines)


def main():
    config = get_storage_config()
    parser = argparse.ArgumentParser(
        description="Load an address book file and summarise it"
    )
    parser.add_argument(
        "file_path",
        nargs="?",
        default=config.address_book_file,
        help="Path to address book JSON file"
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip invalid plan records instead of failing"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the loaded book as JSON"
    )
    args = parser.parse_args()

    if args.skip_invalid:
        config = replace(config, skip_invalid_plans=True)

    service = LoadAddressBookService(
        JsonAddressBookStorage(args.file_path),
        logging_port=LoggingAdapter(),
        config=config,
    )
    try:
        book = service.execute()
    except DataLoadingError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)

    if book is None:
        print(f"No address book found at {args.file_path}")
        return

    if args.json:
        print(json.dumps({
            "persons": [PersonRecordAdapter.from_entity(p).to_dict() for p in book.list_contacts()],
            "plans": [PlanRecordAdapter.from_entity(p).to_dict() for p in book.list_plans()],
        }, indent=2))
    else:
        print(format_book(book))


if __name__ == "__main__":
    main()
