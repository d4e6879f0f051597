from __future__ import annotations

from typing import Optional


class MakeDistributionError(Exception):
    """Base class for every error raised by the client."""


class InvalidArgument(MakeDistributionError, ValueError):
    pass


class InvalidOperation(MakeDistributionError, ValueError):
    pass


class DecodeError(MakeDistributionError, ValueError):
    pass


class MalformedResponse(MakeDistributionError):
    pass


class HttpError(MakeDistributionError):
    """Non-2xx response from the API; keeps the status code and response body."""

    def __init__(self, status_code: int, body: str, *, method: str = "", url: Optional[str] = None) -> None:
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        msg = f"{method} {url} failed with HTTP {status_code}" if method else f"HTTP {status_code}"
        if body:
            msg = f"{msg}: {body}"
        super().__init__(msg)
