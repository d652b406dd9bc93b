from __future__ import annotations

import dataclasses

import pytest

from wikidata_people.errors import MalformedUrlError
from wikidata_people.models import Field, Person, get_last_segment


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://example.org/entity/Q42", "Q42"),
        ("http://www.wikidata.org/prop/direct/P106", "P106"),
        ("http://www.wikidata.org/entity/Q42?flavor=dump#frag", "Q42"),
    ],
)
def test_get_last_segment(url, expected):
    assert get_last_segment(url) == expected


@pytest.mark.parametrize(
    "url",
    [
        "https://example.org",
        "https://example.org/",
        "Q42",
        "/entity/Q42",
        "",
        "mailto:someone@example.org",
        "http://exa mple.org/entity/Q1",
        "http://<example.org>/entity/Q1",
        "http://example.org:port/entity/Q1",
        "http://example.org:99999/entity/Q1",
        "http://:80/entity/Q1",
    ],
)
def test_get_last_segment_rejects_invalid_urls(url):
    with pytest.raises(MalformedUrlError):
        get_last_segment(url)


def test_person_derives_id():
    person = Person.new("Douglas Adams", "English author", "http://www.wikidata.org/entity/Q42")
    assert person.id == "Q42"
    assert person.id_url == "http://www.wikidata.org/entity/Q42"
    assert str(person) == "Q42: Douglas Adams (English author)"


def test_person_rejects_invalid_url():
    with pytest.raises(MalformedUrlError):
        Person.new("Douglas Adams", "English author", "not a url")


def test_field_derives_label_id():
    field = Field.new("http://www.wikidata.org/prop/direct/P106", "occupation", "novelist")
    assert field.label_id == "P106"
    assert field.label == "occupation"
    assert field.value == "novelist"
    assert str(field) == "occupation: novelist"


def test_field_rejects_invalid_url():
    with pytest.raises(ValueError):
        Field.new("P106", "occupation", "novelist")


def test_records_are_immutable():
    person = Person.new("A", "B", "http://www.wikidata.org/entity/Q1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        person.id = "Q2"


def test_person_rejects_host_with_whitespace():
    with pytest.raises(MalformedUrlError, match="invalid host"):
        Person.new("a", "b", "http://exa mple.org/entity/Q1")
