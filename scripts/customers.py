#!/usr/bin/env python
"""
Command-line client for the customers API.

Usage:
    python scripts/customers.py list
    python scripts/customers.py add "Ana" ana@x.com
    python scripts/customers.py delete <id>

Environment:
    CUSTOMERS_API_URL: base URL of the API (default http://localhost:3333)
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.crm.client import CustomerApiClient, CustomerApiError, CustomerBoard  # noqa: E402
from app.crm.config import load_settings  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage customers through the HTTP API.")
    parser.add_argument("--api-url", default=None, help="defaults to $CUSTOMERS_API_URL")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="show every customer")
    add = sub.add_parser("add", help="register a customer")
    add.add_argument("name")
    add.add_argument("email")
    delete = sub.add_parser("delete", help="remove a customer by id")
    delete.add_argument("id")
    return parser


def run(argv: list[str] | None = None, *, api=None) -> int:
    args = build_parser().parse_args(argv)
    if api is None:
        api = CustomerApiClient(base_url=args.api_url or load_settings().customers_api_url)
    board = CustomerBoard(api)

    try:
        board.load()
    except CustomerApiError as e:
        print(f"Could not load customers: {e.message}", file=sys.stderr)
        return 1

    if args.command == "add":
        try:
            created = board.submit(args.name.strip(), args.email.strip())
        except CustomerApiError as e:
            print(f"Could not create customer: {e.message}", file=sys.stderr)
            return 1
        if created is None:
            print("Name and email are required.", file=sys.stderr)
            return 2
    elif args.command == "delete":
        if not board.delete(args.id):
            print(f"Could not delete customer {args.id}.", file=sys.stderr)
            return 1

    print(board.render() or "No customers.")
    return 0


def main() -> None:
    load_dotenv()
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    sys.exit(run())


if __name__ == "__main__":
    main()
