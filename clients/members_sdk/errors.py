from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

DEFAULT_ERROR_MESSAGE = "Something went wrong!"


@dataclass
class ApiError(Exception):
    code: str
    message: str
    details: dict[str, Any] | list[Any] | str | None = None
    trace_id: str | None = None
    status_code: int | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    @classmethod
    def from_http_response(cls, response: httpx.Response) -> "ApiError":
        trace_id = _extract_trace_id(response)
        message = response.reason_phrase or DEFAULT_ERROR_MESSAGE
        try:
            payload = response.json()
        except ValueError:
            return cls(
                code="HTTP_ERROR",
                message=message,
                details=response.text or None,
                trace_id=trace_id,
                status_code=response.status_code,
            )

        if isinstance(payload, dict):
            return cls(
                code=str(payload.get("code") or "HTTP_ERROR"),
                message=str(payload.get("message") or message),
                details=payload.get("details"),
                trace_id=payload.get("trace_id") or trace_id,
                status_code=response.status_code,
            )

        return cls(
            code="HTTP_ERROR",
            message=message,
            details=payload,
            trace_id=trace_id,
            status_code=response.status_code,
        )


class RequestAborted(Exception):
    """Raised inside a fetch whose cancel token was triggered."""

    def __init__(self, request_id: int) -> None:
        super().__init__(f"request {request_id} aborted")
        self.request_id = request_id


def _extract_trace_id(response: httpx.Response) -> str | None:
    return response.headers.get("X-Trace-ID") or response.headers.get("X-Amz-Request-Id")
