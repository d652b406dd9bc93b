from __future__ import annotations

import pytest

from wikidata_people import config
from wikidata_people.config import (
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT,
    SparqlSettings,
    load_config,
    load_settings,
)
from wikidata_people.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("WIKIDATA_SPARQL_ENDPOINT", "WIKIDATA_SPARQL_TIMEOUT", "WIKIDATA_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
    # load_dotenv searches from the package directory, not the cwd.
    monkeypatch.setattr(config, "load_dotenv", lambda: False)
    monkeypatch.chdir(tmp_path)


def test_load_config_reads_sparql_section(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "sparql:\n  endpoint: https://example.org/sparql\n  timeout: 5\n  user_agent: test-agent\n",
        encoding="utf-8",
    )

    result = load_config(path)

    assert result.ok
    assert result.data == SparqlSettings(
        endpoint="https://example.org/sparql", timeout=5, user_agent="test-agent"
    )


def test_load_config_fills_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("sparql:\n  timeout: 10\n", encoding="utf-8")

    result = load_config(path)

    assert result.ok
    assert result.data.endpoint == DEFAULT_ENDPOINT
    assert result.data.timeout == 10


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path).data == SparqlSettings()


def test_load_config_missing_file(tmp_path):
    result = load_config(tmp_path / "nope.yaml")
    assert not result.ok
    assert "not found" in result.error


def test_load_config_bad_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("sparql: [unclosed\n", encoding="utf-8")
    result = load_config(path)
    assert not result.ok
    assert result.error.startswith("YAML parse error")


def test_load_config_bad_structure(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("sparql:\n  timeout: soon\n", encoding="utf-8")
    result = load_config(path)
    assert not result.ok
    assert result.error.startswith("Config structure error")


def test_load_settings_defaults():
    settings = load_settings()
    assert settings.endpoint == DEFAULT_ENDPOINT
    assert settings.timeout == DEFAULT_TIMEOUT


def test_load_settings_reads_local_config_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("sparql:\n  timeout: 7\n", encoding="utf-8")
    assert load_settings().timeout == 7


def test_load_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("WIKIDATA_SPARQL_ENDPOINT", "https://mirror.example.org/sparql")
    monkeypatch.setenv("WIKIDATA_SPARQL_TIMEOUT", "3")

    settings = load_settings()

    assert settings.endpoint == "https://mirror.example.org/sparql"
    assert settings.timeout == 3


def test_load_settings_explicit_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "nope.yaml")


def test_load_settings_rejects_non_integer_timeout(monkeypatch):
    monkeypatch.setenv("WIKIDATA_SPARQL_TIMEOUT", "soon")

    with pytest.raises(ConfigError, match="WIKIDATA_SPARQL_TIMEOUT must be an integer: 'soon'"):
        load_settings()
