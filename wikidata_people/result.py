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

"""Ok/Fail result types for the settings loader.

The CLI inspects `.ok` and logs `.error`; library callers that would
rather have an exception call `.unwrap()`, which turns a Fail into a
ConfigError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, NoReturn, TypeVar

from wikidata_people.errors import ConfigError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    data: T
    ok: bool = field(default=True, init=False)

    def unwrap(self) -> T:
        return self.data


@dataclass(frozen=True, slots=True)
class Fail:
    """Failed load: message plus the path or raw text it concerns."""

    error: str
    context: Any = None
    ok: bool = field(default=False, init=False)

    def unwrap(self) -> NoReturn:
        if self.context is None:
            raise ConfigError(self.error)
        raise ConfigError(f"{self.error} ({self.context})")


Result = Ok[T] | Fail
