from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from clients.members_sdk.cancellation import CancelToken
from clients.members_sdk.errors import ApiError, RequestAborted
from clients.members_sdk.members_client import MembersClient

from admin_panel.app.application.state.directory_store import DirectoryStore
from admin_panel.app.domain.models.member import Member
from admin_panel.app.infrastructure.errors.error_mapper import ErrorMapper
from admin_panel.app.infrastructure.logging.logger import get_logger, log_action


@dataclass
class LoadState:
    loading: bool = False
    error: str | None = None
    loaded: bool = False


class LoadMembersUseCase:
    """Fetches the member list into the store, one request at a time.

    Starting a load cancels the outstanding one first, and only the result of
    the most recent request is applied. Aborted requests leave no error.
    """

    def __init__(self, client: MembersClient, store: DirectoryStore, logger: logging.Logger | None = None) -> None:
        self.client = client
        self.store = store
        self.state = LoadState()
        self._logger = logger or get_logger(__name__)
        self._active: CancelToken | None = None

    @property
    def in_flight(self) -> bool:
        return self._active is not None

    def trigger(self) -> asyncio.Task:
        if self._active is not None:
            self._cancel_active("superseded")
        token = CancelToken()
        self._active = token
        self.state.loading = True
        self.state.error = None
        task = asyncio.get_running_loop().create_task(self._run(token))
        token.bind(task)
        log_action(self._logger, "members", "load", "started", request_id=token.request_id)
        return task

    async def execute(self) -> LoadState:
        task = self.trigger()
        await asyncio.wait({task})
        if not task.cancelled() and task.exception() is not None:
            raise task.exception()
        return self.state

    def abort(self) -> bool:
        if self._active is None:
            return False
        self._cancel_active("aborted")
        self.state.loading = False
        return True

    async def _run(self, token: CancelToken) -> None:
        try:
            rows = await self.client.list_members(cancel_token=token)
            token.raise_if_cancelled()
            members = _to_members(rows)
        except (asyncio.CancelledError, RequestAborted):
            if token.cancelled:
                return
            raise
        except Exception as error:
            self._fail(token, error)
            return

        if self._active is not token:
            log_action(self._logger, "members", "load", "ignored_stale", request_id=token.request_id)
            return
        self._active = None
        self.store.initialize(members)
        self.state.loading = False
        self.state.error = None
        self.state.loaded = True
        log_action(self._logger, "members", "load", "success", request_id=token.request_id, count=len(members))

    def _fail(self, token: CancelToken, error: Exception) -> None:
        if self._active is not token:
            log_action(self._logger, "members", "load", "ignored_stale", request_id=token.request_id)
            return
        self._active = None
        self.state.loading = False
        self.state.error = ErrorMapper.to_display_message(error)
        payload = ErrorMapper.to_payload(error)
        log_action(
            self._logger,
            "members",
            "load",
            "error",
            level=logging.WARNING,
            request_id=token.request_id,
            code=payload["code"],
            status_code=payload["status_code"],
            trace_id=payload["trace_id"],
        )

    def _cancel_active(self, outcome: str) -> None:
        token = self._active
        self._active = None
        if token is None:
            return
        token.cancel()
        log_action(self._logger, "members", "load", outcome, request_id=token.request_id)


def _to_members(rows: list[dict[str, str]]) -> list[Member]:
    try:
        return [Member.from_payload(row) for row in rows]
    except (KeyError, ValueError) as exc:
        raise ApiError(code="INVALID_PAYLOAD", message="Error while fetching the data", details=str(exc)) from exc
