import asyncio
import json

import httpx
import pytest

from core.errors import GatewayDeleteFailure, GatewayEditFailure, GatewaySendFailure
from gateways.base import DeleteResult, EditResult
from gateways.telegram import TelegramGateway


def call(handler, method, *args):
    """Run one gateway method against a mocked Bot API."""
    requests = []

    def recording(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(recording)) as client:
            gateway = TelegramGateway(client, token="123:abc", chat_id="-100500")
            return await getattr(gateway, method)(*args)

    return asyncio.run(go()), requests


def reply(status=200, **body):
    return lambda request: httpx.Response(status, json=body)


def test_send_posts_html_and_returns_message_id() -> None:
    result, requests = call(reply(ok=True, result={"message_id": 42, "date": 1}), "send", "<b>hi</b>")

    assert result == 42
    assert requests[0].url.path == "/bot123:abc/sendMessage"
    payload = json.loads(requests[0].content)
    assert payload == {"chat_id": "-100500", "text": "<b>hi</b>", "parse_mode": "HTML"}


def test_send_api_error_raises() -> None:
    handler = reply(400, ok=False, error_code=400, description="Bad Request: chat not found")

    with pytest.raises(GatewaySendFailure, match="chat not found"):
        call(handler, "send", "text")


def test_send_transport_error_raises() -> None:
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GatewaySendFailure, match="ConnectError"):
        call(handler, "send", "text")


def test_send_non_json_body_raises() -> None:
    with pytest.raises(GatewaySendFailure, match="non-JSON"):
        call(lambda request: httpx.Response(502, text="Bad Gateway"), "send", "text")


def test_edit_ok() -> None:
    result, requests = call(reply(ok=True, result={"message_id": 42}), "edit", 42, "new")

    assert result is EditResult.OK
    assert requests[0].url.path.endswith("/editMessageText")
    assert json.loads(requests[0].content)["message_id"] == 42


def test_edit_not_modified_is_unchanged() -> None:
    handler = reply(
        400,
        ok=False,
        error_code=400,
        description="Bad Request: message is not modified: specified new message content "
        "and reply markup are exactly the same",
    )

    result, _ = call(handler, "edit", 42, "same")

    assert result is EditResult.UNCHANGED


def test_edit_other_error_raises() -> None:
    handler = reply(400, ok=False, error_code=400, description="Bad Request: message to edit not found")

    with pytest.raises(GatewayEditFailure):
        call(handler, "edit", 42, "text")


def test_delete_ok() -> None:
    result, requests = call(reply(ok=True, result=True), "delete", 42)

    assert result is DeleteResult.OK
    assert json.loads(requests[0].content) == {"chat_id": "-100500", "message_id": 42}


def test_delete_missing_message_is_already_gone() -> None:
    handler = reply(400, ok=False, error_code=400, description="Bad Request: message to delete not found")

    result, _ = call(handler, "delete", 42)

    assert result is DeleteResult.ALREADY_GONE


def test_delete_other_error_raises() -> None:
    handler = reply(400, ok=False, error_code=400, description="Bad Request: message can't be deleted")

    with pytest.raises(GatewayDeleteFailure):
        call(handler, "delete", 42)
