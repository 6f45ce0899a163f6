from __future__ import annotations

import logging
from typing import Any

import httpx

from core.errors import (
    GatewayDeleteFailure,
    GatewayEditFailure,
    GatewayError,
    GatewaySendFailure,
)
from gateways.base import DeleteResult, EditResult, MessagingGateway

TG_API = "https://api.telegram.org/bot{token}/{method}"

_NOT_MODIFIED = "message is not modified"
_DELETE_NOT_FOUND = "message to delete not found"

log = logging.getLogger(__name__)


class TelegramGateway(MessagingGateway):
    """Bot API adapter posting HTML-formatted messages into one chat.

    A shared ``httpx.AsyncClient`` is injected at construction time. The Bot
    API answers errors with a JSON body (usually alongside HTTP 400), so the
    body's ``ok`` flag decides success rather than the status code.
    """

    def __init__(self, client: httpx.AsyncClient, token: str, chat_id: str) -> None:
        self._client = client
        self._token = token
        self._chat_id = chat_id

    @property
    def name(self) -> str:
        return "Telegram"

    async def send(self, text: str) -> Any:
        data = await self._call(
            "sendMessage",
            {"chat_id": self._chat_id, "text": text, "parse_mode": "HTML"},
            GatewaySendFailure,
        )
        if not data.get("ok"):
            raise GatewaySendFailure(self._describe(data))

        result = data.get("result") or {}
        message_id = result.get("message_id")
        if message_id is None:
            raise GatewaySendFailure("sendMessage returned no message_id")
        log.info("[%s] Sent message %s", self.name, message_id)
        return message_id

    async def edit(self, message_ref: Any, text: str) -> EditResult:
        data = await self._call(
            "editMessageText",
            {
                "chat_id": self._chat_id,
                "message_id": message_ref,
                "text": text,
                "parse_mode": "HTML",
            },
            GatewayEditFailure,
        )
        if data.get("ok"):
            return EditResult.OK
        if _NOT_MODIFIED in data.get("description", ""):
            return EditResult.UNCHANGED
        raise GatewayEditFailure(self._describe(data))

    async def delete(self, message_ref: Any) -> DeleteResult:
        data = await self._call(
            "deleteMessage",
            {"chat_id": self._chat_id, "message_id": message_ref},
            GatewayDeleteFailure,
        )
        if data.get("ok"):
            return DeleteResult.OK
        if _DELETE_NOT_FOUND in data.get("description", ""):
            return DeleteResult.ALREADY_GONE
        raise GatewayDeleteFailure(self._describe(data))

    async def _call(
        self,
        method: str,
        payload: dict[str, Any],
        error: type[GatewayError],
    ) -> dict[str, Any]:
        url = TG_API.format(token=self._token, method=method)
        try:
            resp = await self._client.post(url, json=payload)
        except httpx.HTTPError as exc:
            raise error(f"{method}: {type(exc).__name__}: {exc}") from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise error(f"{method}: HTTP {resp.status_code} with non-JSON body") from exc

        if not isinstance(data, dict):
            raise error(f"{method}: unexpected response {data!r}")
        return data

    @staticmethod
    def _describe(data: dict[str, Any]) -> str:
        code = data.get("error_code", "?")
        return f"{code}: {data.get('description', 'unknown error')}"
