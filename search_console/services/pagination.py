"""Page bookkeeping for the current query."""

from __future__ import annotations

from search_console.domain.models import PaginationState, SearchResponse

DEFAULT_WINDOW_SIZE = 7


def page_window(
    current_page_one_indexed: int,
    total_pages: int,
    window_size: int = DEFAULT_WINDOW_SIZE,
) -> list[int]:
    """Return the 1-based page numbers to show around the current page."""

    if total_pages <= 0 or window_size <= 0:
        return []
    start = max(1, current_page_one_indexed - window_size // 2)
    end = min(total_pages, start + window_size - 1)
    if end - start + 1 < window_size:
        start = max(1, end - window_size + 1)
    return list(range(start, end + 1))


class PaginationController:
    """Tracks the server-confirmed page.

    Requested pages stay provisional: ``request_page`` only says whether a
    search should be dispatched, and the state moves when ``commit`` receives
    the matching response.
    """

    def __init__(self, state: PaginationState | None = None) -> None:
        self._state = state or PaginationState()

    @property
    def state(self) -> PaginationState:
        return self._state

    def can_request(self, target: int) -> bool:
        return target != self._state.page_index and 0 <= target < self._state.total_pages

    def request_page(self, target: int) -> int | None:
        return target if self.can_request(target) else None

    @staticmethod
    def fresh_search_page() -> int:
        return 0

    def commit(self, response: SearchResponse, requested_page: int | None = None) -> PaginationState:
        """Apply a confirmed response.

        ``requested_page`` stands in for a response without ``number``. The
        resulting page is clamped into ``[0, total_pages)`` whenever there are
        pages at all.
        """

        total_pages = self._state.total_pages
        if response.total_pages is not None:
            total_pages = response.total_pages

        page_index = self._state.page_index
        if response.current_page is not None:
            page_index = response.current_page
        elif requested_page is not None:
            page_index = requested_page

        if total_pages > 0:
            page_index = min(max(page_index, 0), total_pages - 1)

        self._state = PaginationState(page_index=page_index, total_pages=total_pages)
        return self._state

    def has_previous(self) -> bool:
        return self._state.page_index > 0

    def has_next(self) -> bool:
        return self._state.page_index + 1 < self._state.total_pages

    def window(self, window_size: int = DEFAULT_WINDOW_SIZE) -> list[int]:
        return page_window(self._state.current_page_one_indexed, self._state.total_pages, window_size)


__all__ = ["DEFAULT_WINDOW_SIZE", "PaginationController", "page_window"]
