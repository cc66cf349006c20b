"""HTTP client for the search backend endpoints."""

from __future__ import annotations

from typing import Any

import httpx

from search_console.config import BackendSettings
from search_console.domain.models import SearchRequest
from search_console.logging import logger
from search_console.services.exceptions import (
    HttpStatusError,
    MalformedResponseError,
    NetworkError,
)


class SearchBackendClient:
    """Thin wrapper translating ``httpx`` failures into service errors.

    Nothing here retries: every call is made exactly once and the caller
    decides how to degrade.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: BackendSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or BackendSettings()

    async def _post(self, name: str, path: str, payload: dict[str, Any]) -> httpx.Response:
        url = self._settings.url_for(path)
        try:
            response = await self._client.post(
                url,
                json=payload,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            detail = exc.response.text[:500]
            raise HttpStatusError(
                status_code, f"{name} failed ({status_code}): {detail}"
            ) from exc
        except httpx.RequestError as exc:
            raise NetworkError(f"{name} failed: {exc}") from exc
        logger.debug("backend_call_completed", call=name, status_code=response.status_code)
        return response

    async def search(self, request: SearchRequest) -> Any:
        """POST the request and return the decoded JSON body."""

        response = await self._post("search", self._settings.search_path, request.to_payload())
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError("Search response is not valid JSON.") from exc

    async def track_click(self, url: str) -> None:
        await self._post("click_tracker", self._settings.click_tracker_path, {"clickedUrl": url})

    async def remove_link(self, url: str) -> None:
        await self._post("remove_link", self._settings.remove_link_path, {"urlToRemove": url})


__all__ = ["SearchBackendClient"]
