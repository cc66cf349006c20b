"""Pydantic models shared across logic/application layers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

RESULTS_PER_PAGE_OPTIONS = (10, 25, 50, 100)

NO_DESCRIPTION = "No Description"
NO_URL = "#"


class Operator(str, Enum):
    AND = "AND"
    OR = "OR"
    NOT = "NOT"

    @property
    def label(self) -> str:
        return self.value


class SortMethod(str, Enum):
    BY_HITS = "hits"
    ALPHABETICAL = "alphabetical"

    @property
    def label(self) -> str:
        return _SORT_METHOD_LABELS[self]


_SORT_METHOD_LABELS = {
    SortMethod.BY_HITS: "Number of Visits",
    SortMethod.ALPHABETICAL: "Alphabetical",
}


class ResultItem(BaseModel):
    """Canonical (description, url) pair consumed by every display surface."""

    model_config = ConfigDict(frozen=True)

    description: str = NO_DESCRIPTION
    url: str = NO_URL

    def as_pair(self) -> tuple[str, str]:
        return self.description, self.url


class SearchRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str = Field(..., min_length=1)
    operator: Operator
    results_per_page: int = Field(..., ge=1)
    page_index: int = Field(..., ge=0)
    sort_method: SortMethod

    @field_validator("term")
    @classmethod
    def _term_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("search term must not be blank")
        return value

    def to_payload(self) -> dict[str, Any]:
        """Render the JSON body expected by ``POST /search``."""

        return {
            "searchTerm": self.term,
            "operator": self.operator.label,
            "numberOfResults": self.results_per_page,
            "pageNumber": self.page_index,
            "sortMethod": self.sort_method.value,
        }


class SearchResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_pages: int | None = Field(default=None, ge=0)
    current_page: int | None = Field(default=None, ge=0)
    items: tuple[ResultItem, ...] = ()


class PaginationState(BaseModel):
    model_config = ConfigDict(frozen=True)

    page_index: int = Field(default=0, ge=0)
    total_pages: int = Field(default=0, ge=0)

    @property
    def current_page_one_indexed(self) -> int:
        return self.page_index + 1


class SearchSettings(BaseModel):
    """User-adjustable search options exposed by the settings panel."""

    model_config = ConfigDict(frozen=True)

    operator: Operator = Operator.AND
    results_per_page: int = RESULTS_PER_PAGE_OPTIONS[0]
    sort_method: SortMethod = SortMethod.BY_HITS
    excluded_chars: str = ""

    @field_validator("results_per_page")
    @classmethod
    def _known_page_size(cls, value: int) -> int:
        if value not in RESULTS_PER_PAGE_OPTIONS:
            raise ValueError(f"results_per_page must be one of {RESULTS_PER_PAGE_OPTIONS}")
        return value


DisplayStatus = Literal["idle", "loading", "results", "no_results"]


class ConsoleState(BaseModel):
    """Immutable snapshot handed to the rendering layer after every intent."""

    model_config = ConfigDict(frozen=True)

    term: str = ""
    suggestion: str | None = None
    settings: SearchSettings = Field(default_factory=SearchSettings)
    pagination: PaginationState = Field(default_factory=PaginationState)
    results: tuple[ResultItem, ...] = ()
    is_loading: bool = False
    last_navigation: str | None = None

    @property
    def status(self) -> DisplayStatus:
        if self.is_loading:
            return "loading"
        if self.results:
            return "results"
        if self.term.strip():
            return "no_results"
        return "idle"


__all__ = [
    "ConsoleState",
    "DisplayStatus",
    "NO_DESCRIPTION",
    "NO_URL",
    "Operator",
    "PaginationState",
    "RESULTS_PER_PAGE_OPTIONS",
    "ResultItem",
    "SearchRequest",
    "SearchResponse",
    "SearchSettings",
    "SortMethod",
]
