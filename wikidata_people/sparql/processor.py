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
"""SPARQL result projector.

Pulls named values out of SPARQL 1.1 JSON result rows. The endpoint is
trusted to answer with the variables the query selected, so any gap is
raised as MissingBindingError instead of being filled with a default.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from wikidata_people.errors import MissingBindingError


def get_bindings(response: Any) -> list[Any]:
    """Return the `results.bindings` array of a SPARQL JSON results document."""
    if not isinstance(response, Mapping):
        raise MissingBindingError("results", "response is not a JSON object")
    results = response.get("results")
    if not isinstance(results, Mapping):
        raise MissingBindingError("results", "missing or not an object")
    bindings = results.get("bindings")
    if not isinstance(bindings, list):
        raise MissingBindingError("bindings", "missing or not an array")
    return bindings


def get_value(binding: Any, name: str) -> str:
    """Return `binding[name]["value"]`, checking every step of the shape."""
    if not isinstance(binding, Mapping):
        raise MissingBindingError(name, "row is not a JSON object")
    if name not in binding:
        raise MissingBindingError(name, "not present in row")
    term = binding[name]
    if not isinstance(term, Mapping) or "value" not in term:
        raise MissingBindingError(name, "term has no 'value'")
    value = term["value"]
    if not isinstance(value, str):
        raise MissingBindingError(name, f"value is {type(value).__name__}, not str")
    return value


def get_values(binding: Any, names: Sequence[str]) -> list[str]:
    """Get a list of values for the given binding names, in request order."""
    return [get_value(binding, name) for name in names]
