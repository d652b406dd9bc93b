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
"""SPARQL query templates and renderer for the two people lookups.

Templates carry {{variable}} placeholders. Free text is escaped before
it is rendered into a string literal. An entity id that is not of the
form Q42 is rendered as a percent-encoded IRI, which matches no item.
"""

from __future__ import annotations

import re
import urllib.parse

from wikidata_people.logger import get_logger

log = get_logger(__name__)

# https://stackoverflow.com/questions/29601839/standard-regex-to-prevent-sparql-injection/55726984#55726984
_SPARQL_METACHARACTERS = re.compile(r"""(["'\\])""")

_ENTITY_ID = re.compile(r"[A-Z][0-9]+")
_ENTITY_NAMESPACE = "http://www.wikidata.org/entity/"

PREFIXES = """
PREFIX wikibase: <http://wikiba.se/ontology#>
PREFIX wd: <http://www.wikidata.org/entity/>
PREFIX wdt: <http://www.wikidata.org/prop/direct/>
PREFIX p: <http://www.wikidata.org/prop/>
PREFIX ps: <http://www.wikidata.org/prop/statement/>
PREFIX bd: <http://www.bigdata.com/rdf#>
"""

SEARCH_TEMPLATE = """
SELECT
  ?id          # Ex. Q42
  ?name        # Ex. Douglas Adams
  ?description # Ex. English author and humourist (1952–2001)
WHERE {
  VALUES ?name {
    \"\"\"{{name}}\"\"\"@en
  }

  ?id wdt:P31 wd:Q5;                 # Instance of human
    rdfs:label ?name;                # whose label matches ?name
    schema:description ?description. # and their one-line description

  FILTER((LANG(?name)) = "en")
  FILTER((LANG(?description)) = "en")
}
"""

ENTITY_FILTER = '  FILTER(CONTAINS(STR(?value), "/entity/Q"))\n'

FIELDS_TEMPLATE = """
SELECT DISTINCT
  ?propID     # Ex. P734
  ?propLabel  # Ex. family name
  ?value      # Ex. Q351735
  ?valueLabel # Ex. Adams
WHERE {
  VALUES ?target {
    {{id}}
  }

  ?target ?propID ?value.

  ?prop wikibase:directClaim ?propID.

{{entity_filter}}
  SERVICE wikibase:label { bd:serviceParam wikibase:language "[AUTO_LANGUAGE],en". }
}
ORDER BY DESC(?propID) # Lexicographic, not numeric: P21 sorts before P106
"""


def escape_sparql(text: str) -> str:
    """Backslash-escape quotes and backslashes for a SPARQL string literal."""
    if _SPARQL_METACHARACTERS.search(text) is None:
        return text
    return _SPARQL_METACHARACTERS.sub(r"\\\1", text)


def render_template(template: str, variables: dict[str, str]) -> str:
    """Replace all {{key}} placeholders in template with variable values."""
    rendered = template
    for key, value in variables.items():
        rendered = rendered.replace("{{" + key + "}}", value)
    return rendered


def _entity_term(entity_id: str) -> str:
    """Render an id as wd:Q42, or as a quoted IRI that matches nothing if it is not one."""
    if _ENTITY_ID.fullmatch(entity_id):
        return "wd:" + entity_id
    return "<" + _ENTITY_NAMESPACE + urllib.parse.quote(entity_id, safe="") + ">"


def with_prefixes(query: str) -> str:
    """Prepend the shared namespace declarations to a query body."""
    return PREFIXES + query


def build_search_query(name: str) -> str:
    """Query for English-labelled humans whose label is exactly `name`."""
    return render_template(SEARCH_TEMPLATE, {"name": escape_sparql(name)})


def build_fields_query(entity_id: str, only_wikidata_entities: bool = True) -> str:
    """Query for every direct claim on `entity_id`, labels resolved.

    With only_wikidata_entities, rows whose value is a literal (a string,
    a date, a number) are dropped and only entity references are kept.
    """
    query = render_template(
        FIELDS_TEMPLATE,
        {
            "id": _entity_term(entity_id),
            "entity_filter": ENTITY_FILTER if only_wikidata_entities else "",
        },
    )
    log.debug("Rendered fields query for %s (entities only: %s)", entity_id, only_wikidata_entities)
    return query
