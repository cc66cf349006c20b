"""Conversion of raw ``/search`` payloads into canonical responses.

The backend delivers ``content`` either as ``[description, url]`` pairs or as
records carrying ``circularShift``/``url`` fields. The shape is decided once,
from the first element, by :func:`decode_content`; everything downstream only
ever sees :class:`ResultItem` values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union

from search_console.domain.models import NO_DESCRIPTION, NO_URL, ResultItem, SearchResponse
from search_console.services.exceptions import MalformedResponseError

DESCRIPTION_FIELD = "circularShift"
URL_FIELD = "url"


@dataclass(frozen=True, slots=True)
class TupleShaped:
    entries: Sequence[Sequence[Any]]


@dataclass(frozen=True, slots=True)
class RecordShaped:
    entries: Sequence[Mapping[str, Any]]


DecodedContent = Union[TupleShaped, RecordShaped]


def _is_pair_like(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def decode_content(content: Sequence[Any]) -> DecodedContent:
    if content and _is_pair_like(content[0]):
        return TupleShaped(entries=content)
    return RecordShaped(entries=content)


def _display_value(value: Any, fallback: str) -> str:
    if value is None:
        return fallback
    return str(value)


def _item_from_pair(entry: Any, position: int) -> ResultItem:
    if not _is_pair_like(entry):
        raise MalformedResponseError(f"Result #{position} is not a [description, url] pair")
    description = entry[0] if len(entry) > 0 else None
    url = entry[1] if len(entry) > 1 else None
    return ResultItem(
        description=_display_value(description, NO_DESCRIPTION),
        url=_display_value(url, NO_URL),
    )


def _item_from_record(entry: Any, position: int) -> ResultItem:
    if not isinstance(entry, Mapping):
        raise MalformedResponseError(f"Result #{position} is not an object")
    return ResultItem(
        description=_display_value(entry.get(DESCRIPTION_FIELD), NO_DESCRIPTION),
        url=_display_value(entry.get(URL_FIELD), NO_URL),
    )


def to_items(decoded: DecodedContent) -> tuple[ResultItem, ...]:
    if isinstance(decoded, TupleShaped):
        return tuple(_item_from_pair(entry, idx) for idx, entry in enumerate(decoded.entries))
    return tuple(_item_from_record(entry, idx) for idx, entry in enumerate(decoded.entries))


def _optional_page_number(raw: Mapping[str, Any], key: str) -> int | None:
    value = raw.get(key)
    if value is None:
        return None
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise MalformedResponseError(f"Field {key!r} is not an integer: {value!r}") from exc
    if number < 0:
        raise MalformedResponseError(f"Field {key!r} must not be negative: {number}")
    return number


def normalize_response(raw: Any) -> SearchResponse:
    if not isinstance(raw, Mapping):
        raise MalformedResponseError("Search response is not a JSON object.")
    content = raw.get("content")
    if not isinstance(content, list):
        raise MalformedResponseError("Search response has no 'content' list.")

    return SearchResponse(
        total_pages=_optional_page_number(raw, "totalPages"),
        current_page=_optional_page_number(raw, "number"),
        items=to_items(decode_content(content)),
    )


__all__ = [
    "DecodedContent",
    "RecordShaped",
    "TupleShaped",
    "decode_content",
    "normalize_response",
    "to_items",
]
