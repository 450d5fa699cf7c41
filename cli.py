#!/usr/bin/env python3
"""Contacts proxy CLI."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable

from contacts_proxy.config import ConfigError, load_settings
from contacts_proxy.contacts import Contact, ContactService
from contacts_proxy.errors import ContactsProxyError
from contacts_proxy.wix_client import WixClient


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contacts-proxy",
        description="Normalizing proxy in front of the Wix Contacts API.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API.",
    )
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (defaults to PORT or 4000).",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change (development only).",
    )

    list_parser = subparsers.add_parser(
        "list",
        help="List contacts from Wix.",
    )
    list_parser.add_argument(
        "--search",
        default=None,
        help="Case-insensitive first-name filter.",
    )
    list_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the API JSON shape instead of a table.",
    )

    subparsers.add_parser(
        "check-token",
        help="Show which Wix credentials are configured.",
    )

    return parser


def format_contact_rows(contacts: Iterable[Contact]) -> str:
    rows = [f"{'ID':<38} {'REV':>5}  {'NAME':<30} EMAIL"]
    for contact in contacts:
        name = " ".join(part for part in (contact.first_name, contact.last_name) if part)
        rows.append(
            f"{contact.id:<38} {contact.revision:>5}  {name or '-':<30} {contact.email or '-'}"
        )
    return "\n".join(rows)


def _cmd_serve(host: str, port: int | None, reload: bool, log_level: str) -> int:
    import uvicorn

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Cannot start: {exc}", file=sys.stderr)
        return 1

    uvicorn.run(
        "api.main:app",
        host=host,
        port=port or settings.port,
        reload=reload,
        log_level=log_level.lower(),
    )
    return 0


def _cmd_list(search: str | None, as_json: bool) -> int:
    try:
        settings = load_settings()
        service = ContactService(WixClient(settings))
        contacts = service.list_contacts(search)
    except (ConfigError, ContactsProxyError) as exc:
        print(f"List failed: {exc}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps({"items": [c.to_dict() for c in contacts]}, indent=2))
        return 0

    print(format_contact_rows(contacts))
    print(f"\n{len(contacts)} contact(s) | Environment: {settings.environment}")
    return 0


def _cmd_check_token() -> int:
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Token check failed: {exc}", file=sys.stderr)
        return 1

    print("WIX_API_KEY:   ", settings.masked_api_key())
    print("WIX_ACCOUNT_ID:", settings.wix_account_id or "<NOT SET>")
    print("WIX_SITE_ID:   ", settings.wix_site_id or "<NOT SET>")
    print("Environment:   ", settings.environment)
    if not settings.has_api_key:
        print("Wix API key is missing; every upstream call will fail.", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        return _cmd_serve(
            host=args.host, port=args.port, reload=args.reload, log_level=args.log_level
        )
    if args.command == "list":
        return _cmd_list(search=args.search, as_json=args.json)
    if args.command == "check-token":
        return _cmd_check_token()

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
