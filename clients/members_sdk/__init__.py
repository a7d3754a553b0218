from clients.members_sdk.cancellation import CancelToken
from clients.members_sdk.config import SDKConfig
from clients.members_sdk.errors import ApiError, RequestAborted
from clients.members_sdk.http_client import HttpClient
from clients.members_sdk.members_client import MembersClient

__all__ = [
    "SDKConfig",
    "ApiError",
    "RequestAborted",
    "CancelToken",
    "HttpClient",
    "MembersClient",
]
