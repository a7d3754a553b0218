from __future__ import annotations

from clients.members_sdk.cancellation import CancelToken
from clients.members_sdk.http_client import HttpClient
from clients.members_sdk.normalizers import normalize_member_rows


class MembersClient:
    def __init__(self, http_client: HttpClient, members_url: str | None = None) -> None:
        self.http_client = http_client
        self.members_url = members_url or http_client.config.members_url

    async def list_members(self, cancel_token: CancelToken | None = None) -> list[dict[str, str]]:
        payload = await self.http_client.get_json(self.members_url, cancel_token=cancel_token)
        return normalize_member_rows(payload)
