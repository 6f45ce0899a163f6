"""Outage Monitor -- entry point.

Runs exactly one monitoring pass and exits; an external scheduler (cron,
CI schedule) is expected to invoke it repeatedly:

    DtekProvider.fetch_status()
        -> decide(snapshot, stored state)
        -> MessagingGateway send / edit / delete
        -> JsonFileStateStore save / clear

A shared httpx.AsyncClient is injected into the provider and the gateway.
Every failure is logged and mapped to an exit code rather than a traceback.
"""
from __future__ import annotations

import asyncio
import logging
import sys
from datetime import datetime
from functools import partial
from zoneinfo import ZoneInfo

import httpx
from pydantic import ValidationError

from core.config import Settings, get_settings
from core.controller import RunController
from core.errors import ConfigurationError, FetchFailure
from core.state_store import JsonFileStateStore
from gateways import build_gateway
from providers.dtek_provider import DtekProvider

EXIT_OK = 0
EXIT_GATEWAY_FAILURE = 1
EXIT_FETCH_FAILURE = 2
EXIT_CONFIG_ERROR = 3

log = logging.getLogger("outage_monitor")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def run(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> int:
    clock = partial(datetime.now, ZoneInfo(settings.timezone))

    async with httpx.AsyncClient(
        timeout=settings.fetch_timeout_seconds,
        transport=transport,
        follow_redirects=True,
    ) as client:
        try:
            gateway = build_gateway(settings, client)
        except ConfigurationError as exc:
            log.error("Configuration error: %s", exc)
            return EXIT_CONFIG_ERROR

        controller = RunController(
            provider=DtekProvider(
                client=client,
                page_url=settings.shutdowns_page,
                street=settings.street,
                house=settings.house,
                clock=clock,
            ),
            store=JsonFileStateStore(settings.state_file),
            gateway=gateway,
            clock=clock,
        )

        try:
            result = await controller.run_once()
        except FetchFailure as exc:
            log.error("Getting info failed, nothing changed: %s", exc)
            return EXIT_FETCH_FAILURE
        except Exception:
            log.exception("Run aborted")
            return EXIT_GATEWAY_FAILURE

    return EXIT_OK if result.ok else EXIT_GATEWAY_FAILURE


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as exc:
        configure_logging()
        log.error("Invalid configuration:\n%s", exc)
        sys.exit(EXIT_CONFIG_ERROR)

    configure_logging(settings.log_level)
    try:
        sys.exit(asyncio.run(run(settings)))
    except KeyboardInterrupt:
        print("\nShutting down.")
        sys.exit(130)


if __name__ == "__main__":
    main()
