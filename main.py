# SPDX-License-Identifier: MIT
"""
█████╗ ██████╗  █████╗ ███████╗
██╔══██╗██╔══██╗██╔══██╗██╔════╝
███████║██████╔╝███████║███████╗
██╔══██║██╔══██╗██╔══██║╚════██║
██║  ██║██║  ██║██║  ██║███████║
╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>

Licensed under the MIT License.
See LICENSE and THIRD_PARTY_LICENSES for details.

Wikidata People — command line

Looks up humans on Wikidata by exact English name, and lists the
direct claims of an entity with labels resolved by the query service.

Usage:
    python main.py search "William Carpenter"
    python main.py fields Q8006577 [--all-values]
    python main.py demo
"""

from __future__ import annotations

import argparse
import http.client
import json
import sys
import urllib.error
from pathlib import Path

from wikidata_people.config import load_settings
from wikidata_people.errors import InvalidEntityIdError, WikidataPeopleError
from wikidata_people.logger import RunSummary, get_logger
from wikidata_people.people import entity_id, fetch_entity_fields, search_people
from wikidata_people.sparql.client import HttpSparqlGateway, SparqlGateway

log = get_logger("main")


def _search(gateway: SparqlGateway, name: str, summary: RunSummary) -> None:
    counter = summary.start("search", name)
    for person in search_people(name, gateway=gateway):
        print(person)
        counter.records += 1


def _fields(gateway: SparqlGateway, id: str, all_values: bool, summary: RunSummary) -> None:
    counter = summary.start("fields", id)
    for field in fetch_entity_fields(entity_id(id), only_wikidata_entities=not all_values, gateway=gateway):
        print(field)
        counter.records += 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikidata-people",
        description="Search Wikidata for people and list their claims",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to settings YAML (default: ./config.yaml if present)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Find humans by exact English name")
    search.add_argument("name")

    fields = sub.add_parser("fields", help="List direct claims of an entity")
    fields.add_argument("id", help="Entity id, e.g. Q42 or 42")
    fields.add_argument(
        "--all-values",
        action="store_true",
        help="Include literal values (strings, dates, numbers), not just entities",
    )

    sub.add_parser("demo", help="Search 'William Carpenter', then list the claims of Q8006577")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        gateway = HttpSparqlGateway(load_settings(args.config))
    except WikidataPeopleError as exc:
        log.error(exc)
        return 1

    summary = RunSummary()
    try:
        if args.command == "search":
            _search(gateway, args.name, summary)
        elif args.command == "fields":
            _fields(gateway, args.id, args.all_values, summary)
        else:
            _search(gateway, "William Carpenter", summary)
            print()
            _fields(gateway, "8006577", False, summary)
    except InvalidEntityIdError as exc:
        summary.fail_current()
        log.error(exc)
        log.info(summary.report())
        return 1
    except (
        urllib.error.URLError,
        http.client.IncompleteRead,
        TimeoutError,
        UnicodeDecodeError,
        json.JSONDecodeError,
    ) as exc:
        summary.fail_current()
        log.error("Query failed: %s", exc)
        log.info(summary.report())
        return 1

    log.info(summary.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
