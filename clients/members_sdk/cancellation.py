from __future__ import annotations

import asyncio
import itertools

from clients.members_sdk.errors import RequestAborted

_request_ids = itertools.count(1)


class CancelToken:
    """Abort handle for one in-flight fetch.

    The token is bound to the asyncio task running the request. ``cancel()``
    marks the token and cancels that task; the fetch also checks the token
    after every await so a late response is never handed back.
    """

    def __init__(self) -> None:
        self.request_id = next(_request_ids)
        self._cancelled = False
        self._task: asyncio.Task | None = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def bind(self, task: asyncio.Task) -> None:
        self._task = task
        if self._cancelled:
            task.cancel()

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        if self._task is not None and not self._task.done():
            self._task.cancel()

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise RequestAborted(self.request_id)
