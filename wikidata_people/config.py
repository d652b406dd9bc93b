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

"""Loads the endpoint settings from config.yaml and the environment.

Only the gateway reads these; the query builder and record layer take
no configuration at all.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from wikidata_people.errors import ConfigError
from wikidata_people.logger import get_logger
from wikidata_people.result import Fail, Ok, Result

log = get_logger(__name__)

DEFAULT_ENDPOINT = "https://query.wikidata.org/sparql"
DEFAULT_TIMEOUT = 30
DEFAULT_USER_AGENT = "wikidata-people/0.1 (Python urllib)"

DEFAULT_CONFIG_PATH = Path("config.yaml")


@dataclass(frozen=True, slots=True)
class SparqlSettings:
    endpoint: str = DEFAULT_ENDPOINT
    timeout: int = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


def _build_sparql(raw: dict[str, Any]) -> SparqlSettings:
    return SparqlSettings(
        endpoint=str(raw.get("endpoint", DEFAULT_ENDPOINT)),
        timeout=int(raw.get("timeout", DEFAULT_TIMEOUT)),
        user_agent=str(raw.get("user_agent", DEFAULT_USER_AGENT)),
    )


def load_config(path: Path) -> Result[SparqlSettings]:
    """Load the `sparql:` section of a YAML file. Missing keys use defaults."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}")

    try:
        raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=str(path))

    if raw is None:
        return Ok(data=SparqlSettings())

    try:
        settings = _build_sparql(raw.get("sparql") or {})
    except (AttributeError, TypeError, ValueError) as exc:
        return Fail(error=f"Config structure error: {exc}", context=str(path))

    return Ok(data=settings)


def _apply_env(settings: SparqlSettings) -> SparqlSettings:
    """Overlay WIKIDATA_* environment variables (a .env file is honoured)."""
    load_dotenv()
    overrides: dict[str, Any] = {}
    if endpoint := os.getenv("WIKIDATA_SPARQL_ENDPOINT"):
        overrides["endpoint"] = endpoint
    if timeout := os.getenv("WIKIDATA_SPARQL_TIMEOUT"):
        try:
            overrides["timeout"] = int(timeout)
        except ValueError as exc:
            raise ConfigError(f"WIKIDATA_SPARQL_TIMEOUT must be an integer: {timeout!r}") from exc
    if user_agent := os.getenv("WIKIDATA_USER_AGENT"):
        overrides["user_agent"] = user_agent
    return replace(settings, **overrides) if overrides else settings


def load_settings(path: Path | None = None) -> SparqlSettings:
    """Resolve settings: explicit file, else ./config.yaml if present, else defaults.

    An explicit path that fails to load, or a non-integer timeout
    override, raises ConfigError.
    """
    if path is not None:
        settings = load_config(path).unwrap()
    elif DEFAULT_CONFIG_PATH.exists():
        settings = load_config(DEFAULT_CONFIG_PATH).unwrap()
    else:
        settings = SparqlSettings()

    settings = _apply_env(settings)
    log.debug("SPARQL endpoint: %s (timeout %ss)", settings.endpoint, settings.timeout)
    return settings
