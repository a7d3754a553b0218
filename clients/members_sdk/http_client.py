from __future__ import annotations

from typing import Any

import httpx

from clients.members_sdk.cancellation import CancelToken
from clients.members_sdk.config import SDKConfig
from clients.members_sdk.errors import ApiError


class HttpClient:
    def __init__(
        self,
        config: SDKConfig | None = None,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or SDKConfig.from_env()
        self._client = client or httpx.AsyncClient(
            timeout=self.config.timeout_seconds,
            verify=self.config.verify_ssl,
            transport=transport,
        )

    async def get_json(
        self,
        url: str,
        cancel_token: CancelToken | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        try:
            response = await self._client.get(url, headers=dict(headers or {}))
        except httpx.RequestError as exc:
            raise ApiError(
                code="NETWORK_ERROR",
                message=str(exc) or "Error while fetching the data",
                details=type(exc).__name__,
            ) from exc

        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        if response.status_code >= 400:
            raise ApiError.from_http_response(response)

        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(
                code="INVALID_PAYLOAD",
                message="Error while fetching the data",
                details="response body is not valid JSON",
                status_code=response.status_code,
            ) from exc

    async def aclose(self) -> None:
        await self._client.aclose()
