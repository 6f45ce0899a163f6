from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from html.parser import HTMLParser
from typing import Any
from urllib.parse import urljoin

import httpx

from core.errors import EmptyResponse, TransportFailure
from models.snapshot import StatusSnapshot
from providers.base import StatusProvider

_AJAX_PATH = "/ua/ajax"
_UPDATE_FACT_FORMAT = "%d.%m.%Y, %H:%M:%S"

log = logging.getLogger(__name__)


class _CsrfExtractor(HTMLParser):
    """Tiny HTML parser that finds ``<meta name="csrf-token" content=...>``."""

    def __init__(self) -> None:
        super().__init__()
        self.token: str | None = None

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag != "meta" or self.token is not None:
            return
        values = dict(attrs)
        if values.get("name") == "csrf-token" and values.get("content"):
            self.token = values["content"]


def _extract_csrf_token(html: str) -> str | None:
    parser = _CsrfExtractor()
    parser.feed(html)
    return parser.token


class DtekProvider(StatusProvider):
    """Provider adapter for the DTEK shutdowns page.

    The page issues a session cookie and a CSRF token; the outage data
    comes from the site's own AJAX endpoint, queried by street. Cookies set
    by the first request are carried by the shared client into the second.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        page_url: str,
        street: str,
        house: str,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(client)
        self._page_url = page_url
        self._street = street
        self._house = house
        self._clock = clock

    @property
    def name(self) -> str:
        return "DTEK"

    async def fetch_status(self) -> StatusSnapshot:
        log.info("[%s] Getting info for %s, %s", self.name, self._street, self._house)

        page = await self._request("GET", self._page_url)
        token = _extract_csrf_token(page.text)
        if not token:
            raise TransportFailure(f"[{self.name}] csrf-token meta tag not found")

        now = self._clock()
        resp = await self._request(
            "POST",
            urljoin(self._page_url, _AJAX_PATH),
            data={
                "method": "getHomeNum",
                "data[0][name]": "street",
                "data[0][value]": self._street,
                "data[1][name]": "updateFact",
                "data[1][value]": now.strftime(_UPDATE_FACT_FORMAT),
            },
            headers={
                "x-requested-with": "XMLHttpRequest",
                "x-csrf-token": token,
            },
        )

        try:
            info = resp.json()
        except ValueError as exc:
            raise TransportFailure(f"[{self.name}] response is not JSON") from exc

        snapshot = self._to_snapshot(info, fetched_at=now)
        log.info(
            "[%s] %s",
            self.name,
            "Power outage detected" if snapshot.is_outage_active else "No power outage",
        )
        return snapshot

    def _to_snapshot(self, info: Any, fetched_at: datetime) -> StatusSnapshot:
        # Missing data is a failed fetch, never "no outage".
        if not isinstance(info, dict) or not info.get("data"):
            raise EmptyResponse(f"[{self.name}] outage info missing or empty response")

        data = info["data"]
        if not isinstance(data, dict):
            raise EmptyResponse(f"[{self.name}] unexpected data member {type(data).__name__}")

        record = data.get(self._house)
        if record is not None and not isinstance(record, dict):
            raise EmptyResponse(f"[{self.name}] malformed record for house {self._house}")

        return StatusSnapshot.from_house_record(
            record,
            updated_at=info.get("updateTimestamp"),
            fetched_at=fetched_at,
        )

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            resp = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportFailure(f"[{self.name}] HTTP error: {exc!r}") from exc

        if resp.status_code != 200:
            raise TransportFailure(
                f"[{self.name}] Unexpected status {resp.status_code} for {method} {url}"
            )
        return resp
