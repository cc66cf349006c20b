"""Removal of user-excluded characters from raw search input."""

from __future__ import annotations

import re


def filter_term(term: str, excluded_chars: str) -> str:
    """Drop every literal occurrence of each character in ``excluded_chars``."""

    if not term or not excluded_chars:
        return term
    pattern = re.compile(f"[{re.escape(excluded_chars)}]")
    return pattern.sub("", term)


def is_searchable(term: str) -> bool:
    return bool(term and term.strip())


__all__ = ["filter_term", "is_searchable"]
