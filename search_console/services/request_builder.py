"""Construction of canonical search requests."""

from __future__ import annotations

from search_console.domain.models import Operator, SearchRequest, SearchSettings, SortMethod


def build_search_request(
    term: str,
    operator: Operator | str,
    results_per_page: int,
    page_index: int,
    sort_method: SortMethod | str,
) -> SearchRequest:
    if page_index < 0:
        raise ValueError(f"page_index must be >= 0, got {page_index}")
    if not term or not term.strip():
        raise ValueError("Search term must not be empty.")
    return SearchRequest(
        term=term,
        operator=Operator(operator),
        results_per_page=results_per_page,
        page_index=page_index,
        sort_method=SortMethod(sort_method),
    )


def build_from_settings(term: str, settings: SearchSettings, page_index: int) -> SearchRequest:
    return build_search_request(
        term,
        settings.operator,
        settings.results_per_page,
        page_index,
        settings.sort_method,
    )


__all__ = ["build_from_settings", "build_search_request"]
