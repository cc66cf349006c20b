from search_console.domain.intents import (
    AcceptSuggestion,
    ActivateResult,
    ChangePage,
    ChangeSetting,
    EditTerm,
    Intent,
    RemoveItem,
    Submit,
)
from search_console.domain.models import (
    ConsoleState,
    Operator,
    PaginationState,
    ResultItem,
    SearchRequest,
    SearchResponse,
    SearchSettings,
    SortMethod,
)

__all__ = [
    "AcceptSuggestion",
    "ActivateResult",
    "ChangePage",
    "ChangeSetting",
    "ConsoleState",
    "EditTerm",
    "Intent",
    "Operator",
    "PaginationState",
    "RemoveItem",
    "ResultItem",
    "SearchRequest",
    "SearchResponse",
    "SearchSettings",
    "SortMethod",
    "Submit",
]
