"""Shared fixtures: a fake gateway that records queries and returns canned JSON."""

from __future__ import annotations

from typing import Any

import pytest


def term(value: str, kind: str = "uri") -> dict[str, str]:
    return {"type": kind, "value": value}


class FakeGateway:
    def __init__(self, response: Any) -> None:
        self.response = response
        self.queries: list[str] = []

    def execute(self, query: str) -> Any:
        self.queries.append(query)
        return self.response


def results(*rows: dict[str, Any]) -> dict[str, Any]:
    return {"head": {"vars": []}, "results": {"bindings": list(rows)}}


@pytest.fixture
def carpenter_gateway() -> FakeGateway:
    return FakeGateway(
        results(
            {
                "id": term("http://www.wikidata.org/entity/Q7976944"),
                "name": {"type": "literal", "value": "William Carpenter", "xml:lang": "en"},
                "description": {"type": "literal", "value": "English minister", "xml:lang": "en"},
            }
        )
    )


@pytest.fixture
def fields_gateway() -> FakeGateway:
    return FakeGateway(
        results(
            {
                "propID": term("http://www.wikidata.org/prop/direct/P31"),
                "propLabel": term("instance of", "literal"),
                "value": term("http://www.wikidata.org/entity/Q5"),
                "valueLabel": term("human", "literal"),
            },
            {
                "propID": term("http://www.wikidata.org/prop/direct/P106"),
                "propLabel": term("occupation", "literal"),
                "value": term("http://www.wikidata.org/entity/Q6625963"),
                "valueLabel": term("novelist", "literal"),
            },
        )
    )
