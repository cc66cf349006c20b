"""Local result list with position-based removal."""

from __future__ import annotations

from typing import Iterable

from search_console.domain.models import ResultItem
from search_console.logging import logger


class ResultStore:
    def __init__(self, items: Iterable[ResultItem] = ()) -> None:
        self._items: list[ResultItem] = list(items)

    @property
    def items(self) -> tuple[ResultItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def get(self, index: int) -> ResultItem | None:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def replace(self, items: Iterable[ResultItem]) -> None:
        self._items = list(items)

    def remove_at(self, index: int, expected_url: str | None = None) -> bool:
        """Drop the entry at ``index``.

        When ``expected_url`` is given and that position now holds another
        entry (the list was replaced while the backend call was in flight),
        nothing is removed.
        """

        item = self.get(index)
        if item is None:
            logger.warning("result_remove_out_of_range", index=index, size=len(self._items))
            return False
        if expected_url is not None and item.url != expected_url:
            logger.warning(
                "result_remove_position_shifted",
                index=index,
                expected_url=expected_url,
                found_url=item.url,
            )
            return False
        del self._items[index]
        return True


__all__ = ["ResultStore"]
