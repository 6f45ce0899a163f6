from __future__ import annotations

import uuid
from typing import Any

from gateways.base import DeleteResult, EditResult, MessagingGateway


class ConsoleGateway(MessagingGateway):
    """Gateway that prints notifications to stdout instead of a chat.

    Nothing is kept between runs, so edits always report ``OK``: this
    channel cannot tell that the text is unchanged.
    """

    @property
    def name(self) -> str:
        return "Console"

    async def send(self, text: str) -> Any:
        ref = f"console-{uuid.uuid4().hex[:8]}"
        print(f"[send {ref}]\n{text}\n", flush=True)
        return ref

    async def edit(self, message_ref: Any, text: str) -> EditResult:
        print(f"[edit {message_ref}]\n{text}\n", flush=True)
        return EditResult.OK

    async def delete(self, message_ref: Any) -> DeleteResult:
        print(f"[delete {message_ref}]\n", flush=True)
        return DeleteResult.OK
