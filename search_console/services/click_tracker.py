"""Click telemetry followed by navigation to the chosen result."""

from __future__ import annotations

from search_console.logging import logger
from search_console.services.backend import SearchBackendClient
from search_console.services.exceptions import BackendError


def resolve_url(url: str) -> str:
    """Make ``url`` absolute by defaulting to ``https://``."""

    if url and not url.startswith(("http://", "https://")):
        return f"https://{url}"
    return url


class ClickTracker:
    def __init__(self, backend: SearchBackendClient) -> None:
        self._backend = backend

    async def send_telemetry(self, url: str) -> bool:
        """Report the click; returns whether the backend accepted it."""

        try:
            await self._backend.track_click(url)
        except BackendError as exc:
            logger.warning("click_tracking_failed", url=url, error=str(exc))
            return False
        logger.info("click_tracked", url=url)
        return True

    async def activate(self, url: str) -> str:
        resolved = resolve_url(url)
        if resolved != url:
            logger.debug("click_url_resolved", url=url, resolved_url=resolved)
        await self.send_telemetry(url)
        return resolved


__all__ = ["ClickTracker", "resolve_url"]
