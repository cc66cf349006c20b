from search_console.services.backend import SearchBackendClient
from search_console.services.click_tracker import ClickTracker, resolve_url
from search_console.services.console import SearchConsole
from search_console.services.normalizer import normalize_response
from search_console.services.pagination import PaginationController, page_window
from search_console.services.query_filter import filter_term, is_searchable
from search_console.services.request_builder import build_search_request
from search_console.services.results import ResultStore
from search_console.services.suggestions import SuggestionEngine, load_corpus

__all__ = [
    "ClickTracker",
    "PaginationController",
    "ResultStore",
    "SearchBackendClient",
    "SearchConsole",
    "SuggestionEngine",
    "build_search_request",
    "filter_term",
    "is_searchable",
    "load_corpus",
    "normalize_response",
    "page_window",
    "resolve_url",
]
