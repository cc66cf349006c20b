"""Prefix-based inline autocomplete."""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

DEFAULT_CORPUS: Mapping[str, str] = MappingProxyType(
    {
        "gl": "Global Search Engine",
        "ci": "Circular Shift Index",
        "kw": "Keyword In Context",
        "bo": "Boolean Operators",
        "al": "Alphabetical Ordering",
        "pa": "Pagination Controls",
        "ur": "URL Click Tracking",
    }
)


def load_corpus(path: str | Path) -> Mapping[str, str]:
    """Read a JSON object of ``prefix -> description`` into a read-only mapping."""

    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as fp:
        data = json.load(fp)
    if not isinstance(data, dict):
        raise ValueError(f"Suggestion corpus {file_path} must be a JSON object")
    corpus: dict[str, str] = {}
    for prefix, description in data.items():
        if not isinstance(description, str):
            raise ValueError(f"Suggestion for prefix {prefix!r} must be a string")
        corpus[str(prefix)] = description
    return MappingProxyType(corpus)


class SuggestionEngine:
    def __init__(self, corpus: Mapping[str, str] | None = None, *, min_length: int = 2) -> None:
        self._corpus = MappingProxyType(dict(DEFAULT_CORPUS if corpus is None else corpus))
        self._min_length = min_length

    @property
    def corpus(self) -> Mapping[str, str]:
        return self._corpus

    def suggest(self, term: str) -> str | None:
        """Return the completion for ``term``, or ``None``.

        The first corpus prefix that ``term`` starts with (case-insensitively)
        wins. Its description is only offered when it actually extends what
        was typed.
        """

        if len(term) < self._min_length:
            return None
        lowered = term.lower()
        for prefix, description in self._corpus.items():
            if lowered.startswith(prefix.lower()):
                if description.lower().startswith(lowered):
                    return description
                return None
        return None

    def complete(self, term: str) -> str:
        """Return ``term`` replaced by its suggestion when one applies."""

        suggestion = self.suggest(term)
        return suggestion if suggestion is not None else term


__all__ = ["DEFAULT_CORPUS", "SuggestionEngine", "load_corpus"]
