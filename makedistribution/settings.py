"""API settings resolution for the makedistribution client."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)

API_ROOT = "https://makedistribution.com"
DEFAULT_VERSION = "v0"
TOKEN_ENV = "MAKEDISTRIBUTION_API_TOKEN"


@dataclass(frozen=True)
class ApiSettings:
    base_url: str
    token: Optional[str] = field(default=None, repr=False)


def _clean_token(token: Optional[str]) -> Optional[str]:
    if token is None:
        return None
    token = token.strip()
    return token or None


def initialize_api(token: Optional[str] = None, version: str = DEFAULT_VERSION) -> ApiSettings:
    """Build API settings, reading the token from the environment when not given.

    A missing or empty token is not an error: requests are then sent without
    an ``Authorization`` header.
    """
    if token is None:
        token = os.getenv(TOKEN_ENV, "")
        if not token.strip():
            logger.debug(
                "Token not provided and %s is not set; API requests will be made without authorization.",
                TOKEN_ENV,
            )
    base_url = f"{API_ROOT}/s/api/{version}"
    return ApiSettings(base_url=base_url, token=_clean_token(token))


resolve_settings = initialize_api
