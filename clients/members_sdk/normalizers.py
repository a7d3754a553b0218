from __future__ import annotations

from typing import Any

from clients.members_sdk.errors import ApiError

MEMBER_KEYS = ("id", "name", "email", "role")
_WRAPPER_KEYS = ("data", "items", "rows", "members")


def normalize_member_rows(payload: Any) -> list[dict[str, str]]:
    rows: list[Any] | None = None
    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, dict):
        rows = next((payload[key] for key in _WRAPPER_KEYS if isinstance(payload.get(key), list)), None)

    if rows is None:
        raise _invalid_payload(f"expected a list of members, got {type(payload).__name__}")

    normalized: list[dict[str, str]] = []
    for position, row in enumerate(rows):
        if not isinstance(row, dict):
            raise _invalid_payload(f"row {position} is not an object")
        missing = [key for key in MEMBER_KEYS if row.get(key) is None]
        if missing:
            raise _invalid_payload(f"row {position} is missing {', '.join(missing)}")
        normalized.append({key: str(row[key]) for key in MEMBER_KEYS})
    return normalized


def _invalid_payload(details: str) -> ApiError:
    return ApiError(code="INVALID_PAYLOAD", message="Error while fetching the data", details=details)
