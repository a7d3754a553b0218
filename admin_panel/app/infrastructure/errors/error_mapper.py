from clients.members_sdk.errors import DEFAULT_ERROR_MESSAGE, ApiError


class ErrorMapper:
    _KNOWN_CODES = {
        "NETWORK_ERROR": ("Could not reach the members service.", "Check the network connection and reload."),
        "INVALID_PAYLOAD": ("Error while fetching the data", "The members service returned an unexpected response."),
    }

    _STATUS_HINTS = {
        401: ("UNAUTHORIZED", "Reload the panel or sign in again."),
        403: ("PERMISSION_DENIED", "Ask an administrator for access."),
        404: ("NOT_FOUND", "Check ADMIN_PANEL_MEMBERS_URL."),
        500: ("INTERNAL_ERROR", "Reload in a few seconds."),
    }

    @classmethod
    def to_payload(cls, error: Exception) -> dict:
        if isinstance(error, ApiError):
            status_code = error.status_code or -1
            mapped = cls._STATUS_HINTS.get(status_code)
            if mapped is None and status_code >= 500:
                mapped = cls._STATUS_HINTS[500]
            if mapped is not None:
                code, suggestion = mapped
                message = error.message or DEFAULT_ERROR_MESSAGE
            else:
                message, suggestion = cls._KNOWN_CODES.get(
                    error.code,
                    (error.message or DEFAULT_ERROR_MESSAGE, "Reload the panel to try again."),
                )
                code = error.code
            return {
                "code": code,
                "message": message,
                "details": error.details,
                "trace_id": error.trace_id,
                "status_code": error.status_code,
                "suggestion": suggestion,
            }
        return {
            "code": "INTERNAL_ERROR",
            "message": str(error) or DEFAULT_ERROR_MESSAGE,
            "details": type(error).__name__,
            "trace_id": None,
            "status_code": None,
            "suggestion": "Reload the panel to try again.",
        }

    @classmethod
    def to_display_message(cls, error: Exception) -> str:
        return cls.to_payload(error)["message"]
