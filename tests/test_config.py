from __future__ import annotations

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from search_console.config import BackendSettings, ConsoleSettings, get_settings
from search_console.domain.models import Operator, SortMethod


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("SEARCH_CONSOLE_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = ConsoleSettings()

    assert settings.backend.url_for(settings.backend.search_path) == "http://localhost:8080/search"
    assert settings.defaults.operator is Operator.AND
    assert settings.defaults.results_per_page == 10
    assert settings.defaults.sort_method is SortMethod.BY_HITS
    assert settings.suggestions.corpus_path is None
    assert settings.suggestions.min_length == 2


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SEARCH_CONSOLE_BACKEND__BASE_URL", "https://search.example.org")
    monkeypatch.setenv("SEARCH_CONSOLE_BACKEND__REQUEST_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("SEARCH_CONSOLE_DEFAULTS__OPERATOR", "OR")
    monkeypatch.setenv("SEARCH_CONSOLE_DEFAULTS__RESULTS_PER_PAGE", "50")
    monkeypatch.setenv("SEARCH_CONSOLE_SUGGESTIONS__CORPUS_PATH", "corpus.json")
    monkeypatch.setenv("SEARCH_CONSOLE_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.backend.url_for("/search") == "https://search.example.org/search"
    assert settings.backend.request_timeout_seconds == 3.5
    assert settings.defaults.operator is Operator.OR
    assert settings.defaults.results_per_page == 50
    assert settings.suggestions.corpus_path == Path("corpus.json")
    assert settings.log_level == "debug"
    assert get_settings() is settings


def test_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text(
        "SEARCH_CONSOLE_DEFAULTS__SORT_METHOD=alphabetical\n", encoding="utf-8"
    )

    assert ConsoleSettings().defaults.sort_method is SortMethod.ALPHABETICAL


def test_blank_corpus_path_is_none(monkeypatch):
    monkeypatch.setenv("SEARCH_CONSOLE_SUGGESTIONS__CORPUS_PATH", " ")

    assert ConsoleSettings().suggestions.corpus_path is None


def test_rejects_unsupported_page_size(monkeypatch):
    monkeypatch.setenv("SEARCH_CONSOLE_DEFAULTS__RESULTS_PER_PAGE", "30")

    with pytest.raises(ValidationError):
        ConsoleSettings()


def test_endpoint_paths_are_normalized():
    backend = BackendSettings(remove_link_path="remove-link")

    assert backend.remove_link_path == "/remove-link"
    assert backend.url_for(backend.remove_link_path) == "http://localhost:8080/remove-link"
