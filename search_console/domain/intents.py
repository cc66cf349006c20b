"""User intents accepted by the console dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Union

SettingName = Literal["operator", "results_per_page", "sort_method", "excluded_chars"]


@dataclass(frozen=True, slots=True)
class Submit:
    """Start a fresh search from page 0; ``term`` replaces the current input when given."""

    term: str | None = None


@dataclass(frozen=True, slots=True)
class EditTerm:
    term: str


@dataclass(frozen=True, slots=True)
class AcceptSuggestion:
    pass


@dataclass(frozen=True, slots=True)
class ChangePage:
    """Request a 0-based page of the current query."""

    page_index: int


@dataclass(frozen=True, slots=True)
class ChangeSetting:
    name: SettingName
    value: Any


@dataclass(frozen=True, slots=True)
class RemoveItem:
    index: int


@dataclass(frozen=True, slots=True)
class ActivateResult:
    url: str


Intent = Union[Submit, EditTerm, AcceptSuggestion, ChangePage, ChangeSetting, RemoveItem, ActivateResult]

__all__ = [
    "AcceptSuggestion",
    "ActivateResult",
    "ChangePage",
    "ChangeSetting",
    "EditTerm",
    "Intent",
    "RemoveItem",
    "SettingName",
    "Submit",
]
