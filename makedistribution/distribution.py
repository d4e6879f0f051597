"""Distribution references and server-side distribution creation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from . import transport
from .errors import InvalidArgument
from .schemas import parse_created
from .settings import ApiSettings, initialize_api

logger = logging.getLogger(__name__)

CREATE_ENDPOINT = "/1d/dists/"


@dataclass(frozen=True)
class ExistingDistribution:
    path: str


@dataclass(frozen=True)
class DistributionDefinition:
    family: str
    arguments: Mapping[str, Any]


DistributionRef = Union[ExistingDistribution, DistributionDefinition]


def distribution_ref(
    path: Optional[str] = None,
    family: Optional[str] = None,
    arguments: Optional[Mapping[str, Any]] = None,
) -> DistributionRef:
    """Turn the keyword form into a reference, rejecting both-or-neither combinations."""
    if path is not None and (family is not None or arguments is not None):
        raise InvalidArgument("Provide either a path or both family and arguments, but not both.")
    if path is None and (family is None or arguments is None):
        raise InvalidArgument("Both family and arguments must be provided if path is not.")
    if path is not None:
        return ExistingDistribution(path)
    return DistributionDefinition(family, arguments)  # type: ignore[arg-type]


def create_distribution(
    family: str,
    arguments: Mapping[str, Any],
    settings: Optional[ApiSettings] = None,
) -> str:
    """Create a distribution on the server and return its path (``/1d/dists/<id>``)."""
    settings = settings or initialize_api()
    body = {"family": {"requested": family}, "arguments": dict(arguments)}
    created = parse_created(transport.post(settings, CREATE_ENDPOINT, body))
    path = f"{CREATE_ENDPOINT}{created.id}"
    logger.debug("Created %s distribution at %s", family, path)
    return path


def resolve_distribution(
    settings: Optional[ApiSettings] = None,
    path: Optional[str] = None,
    family: Optional[str] = None,
    arguments: Optional[Mapping[str, Any]] = None,
    *,
    ref: Optional[DistributionRef] = None,
) -> str:
    if ref is None:
        ref = distribution_ref(path, family, arguments)
    elif path is not None or family is not None or arguments is not None:
        raise InvalidArgument("Provide either a path or both family and arguments, but not both.")
    if isinstance(ref, ExistingDistribution):
        return ref.path
    return create_distribution(ref.family, ref.arguments, settings)
