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
"""SPARQL HTTP gateway using urllib.

POSTs a query to the endpoint and returns the decoded JSON document.
No domain logic and no error translation: HTTP, connection, timeout and
JSON errors reach the caller exactly as urllib and json raise them.
"""

from __future__ import annotations

import json
import ssl
import urllib.parse
import urllib.request
from typing import Any, Protocol

import certifi

from wikidata_people.config import SparqlSettings
from wikidata_people.logger import get_logger

log = get_logger(__name__)

_ssl_ctx = ssl.create_default_context(cafile=certifi.where())


class SparqlGateway(Protocol):
    """Anything that can run a SPARQL query and return the JSON results document."""

    def execute(self, query: str) -> dict[str, Any]: ...


class HttpSparqlGateway:
    """Gateway backed by a SPARQL 1.1 protocol endpoint."""

    def __init__(self, settings: SparqlSettings) -> None:
        self.settings = settings

    def execute(self, query: str) -> dict[str, Any]:
        endpoint = self.settings.endpoint
        encoded_body = urllib.parse.urlencode({"query": query}).encode("utf-8")

        req = urllib.request.Request(
            endpoint,
            data=encoded_body,
            headers={
                "Content-Type": "application/x-www-form-urlencoded",
                "Accept": "application/sparql-results+json",
                "User-Agent": self.settings.user_agent,
            },
            method="POST",
        )

        log.info("SPARQL query → %s (%d bytes)", endpoint, len(encoded_body))

        with urllib.request.urlopen(req, timeout=self.settings.timeout, context=_ssl_ctx) as resp:
            body = resp.read()

        log.info("SPARQL response ← %d bytes", len(body))
        return json.loads(body.decode("utf-8"))
