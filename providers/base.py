from __future__ import annotations

from abc import ABC, abstractmethod

import httpx

from models.snapshot import StatusSnapshot


class StatusProvider(ABC):
    """Abstract base for outage-status sources.

    Each concrete provider fetches its own data source for one configured
    address and normalises it into a ``StatusSnapshot``.

    A shared ``httpx.AsyncClient`` is injected at construction time so
    that the provider and the messaging gateway reuse one connection pool.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name (e.g. 'DTEK')."""

    @abstractmethod
    async def fetch_status(self) -> StatusSnapshot:
        """Fetch the current outage status for the configured address.

        Implementations must raise ``FetchFailure`` (never return a guess)
        when the source is unreachable or its answer cannot be trusted, and
        must not hang: the injected client's timeout bounds every request.
        """
