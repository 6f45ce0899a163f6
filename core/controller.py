from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from core.composer import compose
from core.errors import GatewayError
from core.reconciler import decide
from core.state_store import StateStore
from gateways.base import DeleteResult, EditResult, MessagingGateway
from models.action import Action, Outcome, RunResult
from models.snapshot import StatusSnapshot
from models.state import NotificationState
from providers.base import StatusProvider

log = logging.getLogger(__name__)


class RunController:
    """Executes one complete monitoring pass.

    fetch snapshot -> load state -> decide -> act through the gateway ->
    bring the store in line with what actually happened remotely.

    The store only ever records a ref after a successful send, and is only
    cleared once the outage is over. Gateway failures on create/refresh
    leave it as it was, so the next scheduled run retries the same action.
    """

    def __init__(
        self,
        provider: StatusProvider,
        store: StateStore,
        gateway: MessagingGateway,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._provider = provider
        self._store = store
        self._gateway = gateway
        self._clock = clock

    async def run_once(self) -> RunResult:
        """Run one pass. ``FetchFailure`` propagates with the store untouched."""
        snapshot = await self._provider.fetch_status()
        state = self._store.load()
        action = decide(snapshot, state)
        log.info("Action: %s (stored ref=%s)", action.value, state.message_ref if state else None)

        if action is Action.NOOP:
            result = RunResult(action, Outcome.NOTHING_TO_DO)
        elif action is Action.CLEAR:
            result = await self._clear(state)
        elif action is Action.CREATE:
            result = await self._create(snapshot)
        else:
            result = await self._refresh(snapshot, state)

        log.log(
            logging.INFO if result.ok else logging.WARNING,
            "Run finished: action=%s outcome=%s ref=%s",
            result.action.value,
            result.outcome.value,
            result.message_ref,
        )
        return result

    async def _clear(self, state: NotificationState) -> RunResult:
        error = None
        try:
            deleted = await self._gateway.delete(state.message_ref)
        except Exception as exc:
            log.exception("[%s] Failed to delete message %s", self._gateway.name, state.message_ref)
            outcome = Outcome.DELETE_FAILED
            error = str(exc)
        else:
            outcome = Outcome.DELETED if deleted is DeleteResult.OK else Outcome.ALREADY_GONE

        # The local record goes whatever happened remotely.
        self._store.clear()
        return RunResult(Action.CLEAR, outcome, error=error)

    async def _create(self, snapshot: StatusSnapshot) -> RunResult:
        now = self._clock()
        text = compose(snapshot, now)
        try:
            ref = await self._gateway.send(text)
        except GatewayError as exc:
            log.error("[%s] Send failed, will retry next run: %s", self._gateway.name, exc)
            return RunResult(Action.CREATE, Outcome.SEND_FAILED, error=str(exc))

        self._store.save(NotificationState(message_ref=ref, created_at=now, updated_at=now))
        return RunResult(Action.CREATE, Outcome.SENT, message_ref=ref)

    async def _refresh(self, snapshot: StatusSnapshot, state: NotificationState) -> RunResult:
        now = self._clock()
        text = compose(snapshot, now)
        try:
            edited = await self._gateway.edit(state.message_ref, text)
        except GatewayError as exc:
            log.error(
                "[%s] Edit of %s failed, will retry next run: %s",
                self._gateway.name,
                state.message_ref,
                exc,
            )
            return RunResult(
                Action.REFRESH,
                Outcome.EDIT_FAILED,
                message_ref=state.message_ref,
                error=str(exc),
            )

        if edited is EditResult.UNCHANGED:
            log.info("[%s] Message content is the same, nothing to update", self._gateway.name)
        self._store.save(state.touched(now))
        outcome = Outcome.EDITED if edited is EditResult.OK else Outcome.UNCHANGED
        return RunResult(Action.REFRESH, outcome, message_ref=state.message_ref)
