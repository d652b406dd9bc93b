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

"""Typed records built from SPARQL result rows.

Both records keep the full URL they were built from and a short id
taken from its last path segment (Q42, P106).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from wikidata_people.errors import MalformedUrlError

# Whitespace, control characters and IRI delimiters.
_BAD_HOST_CHARS = re.compile(r"[\s\x00-\x1f\x7f<>]")


def get_last_segment(url: str) -> str:
    """Get the last part of the path of a URL.

    >>> get_last_segment("http://www.wikidata.org/entity/Q42")
    'Q42'
    """
    try:
        parts = urlsplit(url)
        parts.port
    except ValueError as exc:
        raise MalformedUrlError(url, str(exc)) from exc
    if not parts.scheme or not parts.hostname:
        raise MalformedUrlError(url, "not an absolute URL")
    if _BAD_HOST_CHARS.search(parts.hostname):
        raise MalformedUrlError(url, "invalid host")

    segment = parts.path.rsplit("/", 1)[-1]
    if not segment:
        raise MalformedUrlError(url, "no path segment")
    return segment


@dataclass(frozen=True, slots=True)
class Person:
    """A human entity matched by name."""

    name: str         # Douglas Adams
    description: str  # English author and humourist (1952–2001)
    id: str           # Q42
    id_url: str       # http://www.wikidata.org/entity/Q42

    @classmethod
    def new(cls, name: str, description: str, id_url: str) -> Person:
        return cls(name=name, description=description, id=get_last_segment(id_url), id_url=id_url)

    def __str__(self) -> str:
        return f"{self.id}: {self.name} ({self.description})"


@dataclass(frozen=True, slots=True)
class Field:
    """One property/value claim on an entity."""

    value: str         # novelist
    label: str         # occupation
    label_id: str      # P106
    label_id_url: str  # http://www.wikidata.org/prop/direct/P106

    @classmethod
    def new(cls, label_id_url: str, label: str, value: str) -> Field:
        return cls(value=value, label=label, label_id=get_last_segment(label_id_url), label_id_url=label_id_url)

    def __str__(self) -> str:
        return f"{self.label}: {self.value}"
