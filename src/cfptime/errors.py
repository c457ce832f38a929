from __future__ import annotations


class CfpTimeError(Exception):
    """Base client error."""


class TransportError(CfpTimeError):
    """Network/connection failure before a response was received."""


class DecodeError(CfpTimeError):
    """Response body is not JSON or does not have the expected shape."""


class HttpError(CfpTimeError):
    def __init__(self, status: int, message: str, body: str | None = None):
        super().__init__(message)
        self.status = status
        self.body = body


class NotFound(HttpError):
    """404 on a single-resource lookup."""

    def __init__(self, path: str, body: str | None = None):
        super().__init__(404, f"{path} not found", body)
        self.path = path
