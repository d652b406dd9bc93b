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

"""Stderr logger plus the per-lookup summary printed at the end of a CLI run."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field

_FMT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a stderr logger; WIKIDATA_PEOPLE_LOG_LEVEL sets the level (default INFO)."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        level = os.getenv("WIKIDATA_PEOPLE_LOG_LEVEL", "INFO").upper()
        logger.setLevel(getattr(logging, level, logging.INFO))
    return logger


@dataclass
class LookupCounter:
    """One lookup: its kind (search / fields), what was asked, and the outcome."""

    kind: str
    target: str
    records: int = 0
    failed: bool = False


@dataclass
class RunSummary:
    """Lookups issued in one CLI run, in order."""

    lookups: list[LookupCounter] = field(default_factory=list)

    def start(self, kind: str, target: str) -> LookupCounter:
        """Open a counter for a lookup about to be issued."""
        counter = LookupCounter(kind=kind, target=target)
        self.lookups.append(counter)
        return counter

    def fail_current(self) -> None:
        if self.lookups:
            self.lookups[-1].failed = True

    def report(self) -> str:
        """Format a summary block, one line per lookup."""
        lines: list[str] = ["", "Lookup Summary", "=" * 40]
        for lookup in self.lookups:
            outcome = "FAILED" if lookup.failed else f"{lookup.records} records"
            lines.append(f"{lookup.kind} {lookup.target!r}: {outcome}")
        total = sum(lookup.records for lookup in self.lookups)
        lines.append("-" * 40)
        lines.append(f"{len(self.lookups)} lookups, {total} records")
        lines.append("=" * 40)
        return "\n".join(lines)
