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

"""Exception types raised by the query and record layers.

Configuration loading reports problems through Result (see result.py);
the lookup path itself raises, since a malformed endpoint row is an
integration fault rather than something a caller can recover from.
"""

from __future__ import annotations


class WikidataPeopleError(Exception):
    """Base class for all errors raised by this package."""


class MalformedUrlError(WikidataPeopleError, ValueError):
    """An entity or property URL could not be reduced to a short id."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Malformed URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class MissingBindingError(WikidataPeopleError, KeyError):
    """A result row lacks a requested variable or has an unexpected shape."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(name)
        self.name = name
        self.reason = reason

    def __str__(self) -> str:
        return f"Binding '{self.name}': {self.reason}"


class ConfigError(WikidataPeopleError):
    """A settings file or WIKIDATA_* override could not be loaded."""


class InvalidEntityIdError(WikidataPeopleError, ValueError):
    """A caller-supplied entity id is not of the form Q<digits>."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Not a Wikidata item id: {value!r}")
        self.value = value
