from __future__ import annotations

import logging
from typing import Any, Dict

import httpx

from .errors import DecodeError, HttpError
from .settings import ApiSettings

logger = logging.getLogger(__name__)


def _headers(settings: ApiSettings) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    if settings.token:
        headers["Authorization"] = f"Token {settings.token}"
    return headers


def _client(headers: Dict[str, str]) -> httpx.Client:
    return httpx.Client(headers=headers)


def _request(settings: ApiSettings, method: str, path: str, **kwargs: Any) -> Any:
    url = f"{settings.base_url}{path}"
    logger.debug("%s request to %s", method, url)
    with _client(_headers(settings)) as client:
        resp = client.request(method, url, **kwargs)
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            body = resp.text
            logger.error("Error in %s request: %s", method, body)
            raise HttpError(resp.status_code, body, method=method, url=url) from exc
        try:
            return resp.json()
        except ValueError as exc:
            raise DecodeError(f"{method} {url} returned a non-JSON body: {resp.text[:200]!r}") from exc


def get(settings: ApiSettings, path: str) -> Any:
    return _request(settings, "GET", path)


def post(settings: ApiSettings, path: str, body: Any) -> Any:
    # httpx sets Content-Type: application/json for json= payloads
    return _request(settings, "POST", path, json=body)
