"""State container driving the search console.

Every user action is expressed as an intent and fed through
:meth:`SearchConsole.dispatch`, which returns an immutable
:class:`ConsoleState` snapshot for the rendering layer. Searches carry a
monotonically increasing sequence number; a response that arrives after a
newer search was dispatched is dropped instead of overwriting fresher state.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable

from pydantic import ValidationError

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
from search_console.domain.models import NO_URL, ConsoleState, SearchSettings
from search_console.logging import logger
from search_console.services.backend import SearchBackendClient
from search_console.services.click_tracker import ClickTracker
from search_console.services.exceptions import BackendError, InvalidSettingError
from search_console.services.normalizer import normalize_response
from search_console.services.pagination import PaginationController
from search_console.services.query_filter import filter_term, is_searchable
from search_console.services.request_builder import build_from_settings
from search_console.services.results import ResultStore
from search_console.services.suggestions import SuggestionEngine

Navigator = Callable[[str], Any]


class SearchConsole:
    def __init__(
        self,
        backend: SearchBackendClient,
        *,
        settings: SearchSettings | None = None,
        suggestions: SuggestionEngine | None = None,
        navigator: Navigator | None = None,
    ) -> None:
        self._backend = backend
        self._settings = settings or SearchSettings()
        self._suggestions = suggestions or SuggestionEngine()
        self._navigator = navigator
        self._click_tracker = ClickTracker(backend)
        self._pagination = PaginationController()
        self._results = ResultStore()

        self._term = ""
        self._suggestion: str | None = None
        self._query_term: str | None = None
        self._is_loading = False
        self._last_navigation: str | None = None
        self._sequence = 0

    @property
    def state(self) -> ConsoleState:
        return ConsoleState(
            term=self._term,
            suggestion=self._suggestion,
            settings=self._settings,
            pagination=self._pagination.state,
            results=self._results.items,
            is_loading=self._is_loading,
            last_navigation=self._last_navigation,
        )

    @property
    def pagination(self) -> PaginationController:
        return self._pagination

    async def dispatch(self, intent: Intent) -> ConsoleState:
        if isinstance(intent, Submit):
            await self._submit(intent)
        elif isinstance(intent, EditTerm):
            self._set_term(intent.term)
        elif isinstance(intent, AcceptSuggestion):
            if self._suggestion is not None:
                self._term = self._suggestion
                self._suggestion = None
        elif isinstance(intent, ChangePage):
            await self._change_page(intent.page_index)
        elif isinstance(intent, ChangeSetting):
            self._change_setting(intent)
        elif isinstance(intent, RemoveItem):
            await self._remove_item(intent.index)
        elif isinstance(intent, ActivateResult):
            await self._activate(intent.url)
        else:
            raise TypeError(f"Unsupported intent: {intent!r}")
        return self.state

    def _set_term(self, term: str) -> None:
        self._term = term
        self._suggestion = self._suggestions.suggest(term)

    async def _submit(self, intent: Submit) -> None:
        if intent.term is not None:
            self._set_term(intent.term)
        query = filter_term(self._term, self._settings.excluded_chars)
        if not is_searchable(query):
            logger.info("search_skipped_empty_term", term=self._term)
            return
        self._query_term = query
        await self._search(query, self._pagination.fresh_search_page())

    async def _change_page(self, target: int) -> None:
        page = self._pagination.request_page(target)
        if page is None or self._query_term is None:
            logger.debug(
                "page_change_ignored",
                target=target,
                page_index=self._pagination.state.page_index,
                total_pages=self._pagination.state.total_pages,
            )
            return
        await self._search(self._query_term, page)

    def _change_setting(self, intent: ChangeSetting) -> None:
        if intent.name not in SearchSettings.model_fields:
            raise InvalidSettingError(f"Unknown setting: {intent.name}")
        data = self._settings.model_dump()
        data[intent.name] = intent.value
        try:
            self._settings = SearchSettings.model_validate(data)
        except ValidationError as exc:
            raise InvalidSettingError(f"Invalid value for {intent.name}: {intent.value!r}") from exc
        logger.info("setting_changed", name=intent.name, value=str(intent.value))

    async def _search(self, term: str, page_index: int) -> None:
        request = build_from_settings(term, self._settings, page_index)
        self._sequence += 1
        sequence = self._sequence
        self._is_loading = True
        logger.info("search_dispatched", sequence=sequence, **request.to_payload())

        try:
            raw = await self._backend.search(request)
            response = normalize_response(raw)
        except BackendError as exc:
            if sequence == self._sequence:
                self._is_loading = False
            logger.warning(
                "search_failed",
                sequence=sequence,
                error_type=exc.__class__.__name__,
                error=str(exc),
            )
            return

        if sequence != self._sequence:
            logger.info("search_response_discarded", sequence=sequence, latest=self._sequence)
            return

        self._pagination.commit(response, requested_page=request.page_index)
        self._results.replace(response.items)
        self._is_loading = False
        logger.info(
            "search_completed",
            sequence=sequence,
            results=len(response.items),
            page_index=self._pagination.state.page_index,
            total_pages=self._pagination.state.total_pages,
        )

    async def _remove_item(self, index: int) -> None:
        item = self._results.get(index)
        if item is None:
            logger.warning("remove_link_unknown_index", index=index)
            return
        try:
            await self._backend.remove_link(item.url)
        except BackendError as exc:
            logger.warning("remove_link_failed", url=item.url, error=str(exc))
            return
        if self._results.remove_at(index, expected_url=item.url):
            logger.info("remove_link_succeeded", url=item.url, index=index)

    async def _activate(self, url: str) -> None:
        if not url.strip() or url == NO_URL:
            self._last_navigation = None
            logger.info("navigation_skipped_no_url", url=url)
            return
        resolved = await self._click_tracker.activate(url)
        self._last_navigation = resolved
        if self._navigator is None:
            return
        outcome = self._navigator(resolved)
        if inspect.isawaitable(outcome):
            await outcome


__all__ = ["Navigator", "SearchConsole"]
