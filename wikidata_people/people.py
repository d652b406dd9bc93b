# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Person search and entity field lookup against Wikidata.

Each call renders one query, makes one blocking request through the
gateway and builds every record before handing any back, so a bad row
aborts the whole lookup and no partial result escapes.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from wikidata_people.config import load_settings
from wikidata_people.errors import InvalidEntityIdError
from wikidata_people.logger import get_logger
from wikidata_people.models import Field, Person
from wikidata_people.sparql.client import HttpSparqlGateway, SparqlGateway
from wikidata_people.sparql.processor import get_bindings, get_values
from wikidata_people.sparql.queries import build_fields_query, build_search_query, with_prefixes

log = get_logger(__name__)

_DIGITS = re.compile(r"[0-9]+")


def entity_id(value: int | str) -> str:
    """Normalise 42, "42" or "Q42" to the short id "Q42".

    Anything else raises InvalidEntityIdError.
    """
    text = str(value).strip()
    if text[:1] in ("Q", "q"):
        text = text[1:]
    if not _DIGITS.fullmatch(text):
        raise InvalidEntityIdError(value)
    return "Q" + text


def _default_gateway() -> SparqlGateway:
    return HttpSparqlGateway(load_settings())


def _make_request(query: str, gateway: SparqlGateway | None) -> list:
    """Run a query body with the shared prefixes and return its result rows."""
    gateway = gateway or _default_gateway()
    response = gateway.execute(with_prefixes(query))
    bindings = get_bindings(response)
    log.debug("Got %d bindings", len(bindings))
    return bindings


def search_people(name: str, gateway: SparqlGateway | None = None) -> Iterator[Person]:
    """Find humans whose English label is exactly `name`."""
    log.info("Searching people named %r", name)
    people = []
    for row in _make_request(build_search_query(name), gateway):
        row_name, description, id_url = get_values(row, ["name", "description", "id"])
        people.append(Person.new(row_name, description, id_url))
    log.info("Found %d people named %r", len(people), name)
    return iter(people)


def fetch_entity_fields(
    id: str,
    only_wikidata_entities: bool = True,
    gateway: SparqlGateway | None = None,
) -> Iterator[Field]:
    """Get the direct claims of an entity by exact id (ex. Q42).

    only_wikidata_entities keeps only values that are themselves
    entities, dropping literals such as names, dates and identifiers.
    """
    log.info("Fetching fields of %s", id)
    fields = []
    for row in _make_request(build_fields_query(id, only_wikidata_entities), gateway):
        label_id_url, label, value = get_values(row, ["propID", "propLabel", "valueLabel"])
        fields.append(Field.new(label_id_url, label, value))
    log.info("Fetched %d fields of %s", len(fields), id)
    return iter(fields)
