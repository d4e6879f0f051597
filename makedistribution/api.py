"""Public query functions: density, CDF, quantiles and random samples."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Union

from . import transport
from .distribution import distribution_ref, resolve_distribution
from .endpoints import Operation, as_operation, normalize_path, query_string, query_values
from .schemas import extract_values
from .settings import ApiSettings, initialize_api

Values = Union[Iterable[float], float]


def query(
    operation: Union[Operation, str],
    value: Any,
    family: Optional[str] = None,
    arguments: Optional[Mapping[str, Any]] = None,
    path: Optional[str] = None,
    settings: Optional[ApiSettings] = None,
) -> List[float]:
    """Resolve (or create) a distribution, query it and return the numeric results.

    Arguments and query values are validated before any request is sent. At
    most two requests are made: the optional creation POST and the query GET.
    """
    op = as_operation(operation)
    ref = distribution_ref(path, family, arguments)
    expected = None
    if op is not Operation.SAMPLE:
        value = query_values(value)
        expected = len(value)
    qs = query_string(op, value)
    settings = settings or initialize_api()
    dist_path = resolve_distribution(settings, ref=ref)
    data = transport.get(settings, f"{normalize_path(dist_path)}{op.value}/?{qs}")
    return extract_values(op, data, expected)


def density(
    x: Values,
    family: Optional[str] = None,
    arguments: Optional[Mapping[str, Any]] = None,
    path: Optional[str] = None,
    settings: Optional[ApiSettings] = None,
) -> List[float]:
    """Evaluate the probability density at each point of ``x``."""
    return query(Operation.DENSITY, x, family, arguments, path, settings)


def cumulative(
    x: Values,
    family: Optional[str] = None,
    arguments: Optional[Mapping[str, Any]] = None,
    path: Optional[str] = None,
    settings: Optional[ApiSettings] = None,
) -> List[float]:
    """Evaluate the cumulative distribution function at each point of ``x``."""
    return query(Operation.CUMULATIVE, x, family, arguments, path, settings)


def quantile(
    p: Values,
    family: Optional[str] = None,
    arguments: Optional[Mapping[str, Any]] = None,
    path: Optional[str] = None,
    settings: Optional[ApiSettings] = None,
) -> List[float]:
    """Evaluate the quantile function at each probability in ``p``."""
    return query(Operation.QUANTILE, p, family, arguments, path, settings)


def sample(
    size: int,
    family: Optional[str] = None,
    arguments: Optional[Mapping[str, Any]] = None,
    path: Optional[str] = None,
    settings: Optional[ApiSettings] = None,
) -> List[float]:
    """Draw ``size`` random samples; ordering is decided by the server."""
    return query(Operation.SAMPLE, size, family, arguments, path, settings)


def get_distribution(path: str, settings: Optional[ApiSettings] = None) -> Any:
    """Fetch a distribution's metadata (fit status etc.) as decoded JSON."""
    return transport.get(settings or initialize_api(), normalize_path(path))


dmakedist = density
pmakedist = cumulative
qmakedist = quantile
rmakedist = sample
