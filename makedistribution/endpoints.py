"""Endpoint construction for distribution function queries."""

from __future__ import annotations

import enum
import math
import numbers
from typing import Any, Iterable, List, Union

from .errors import InvalidArgument, InvalidOperation


class Operation(str, enum.Enum):
    DENSITY = "pdf"
    CUMULATIVE = "cdf"
    QUANTILE = "qf"
    SAMPLE = "samples"

    @property
    def param(self) -> str:
        return _QUERY_PARAMS[self]


_QUERY_PARAMS = {
    Operation.DENSITY: "x",
    Operation.CUMULATIVE: "x",
    Operation.QUANTILE: "p",
    Operation.SAMPLE: "size",
}

_ALIASES = {
    "density": Operation.DENSITY,
    "cumulative": Operation.CUMULATIVE,
    "quantile": Operation.QUANTILE,
    "sample": Operation.SAMPLE,
}


def as_operation(operation: Union[Operation, str]) -> Operation:
    """Accept an ``Operation``, its endpoint suffix ("pdf") or its name ("density")."""
    if isinstance(operation, Operation):
        return operation
    if isinstance(operation, str):
        key = operation.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return Operation(key)
        except ValueError:
            pass
    raise InvalidOperation(f"Invalid operation provided: {operation!r}")


def normalize_path(path: str) -> str:
    """Return ``path`` with exactly one leading and one trailing slash."""
    return f"/{path.strip('/')}/" if path.strip("/") else "/"


def _format_number(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"query values must be numbers, got {value!r}")
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if not math.isfinite(value):
        raise InvalidArgument(f"query values must be finite, got {value!r}")
    # "+" in a query string decodes to a space
    return repr(float(value)).replace("e+", "e")


def _sample_size(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
        raise InvalidArgument(f"sample size must be a non-negative integer, got {value!r}")
    return int(value)


def query_values(value: Union[Iterable[Any], numbers.Real]) -> List[Any]:
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return [value]
    if isinstance(value, (str, bytes)):
        raise InvalidArgument(f"query values must be numbers, got {value!r}")
    try:
        values = list(value)  # type: ignore[arg-type]
    except TypeError as exc:
        raise InvalidArgument(f"query values must be a sequence of numbers, got {value!r}") from exc
    if not values:
        raise InvalidArgument("at least one query value is required")
    return values


def query_string(operation: Union[Operation, str], value: Any) -> str:
    op = as_operation(operation)
    if op is Operation.SAMPLE:
        return f"{op.param}={_sample_size(value)}"
    return f"{op.param}={','.join(_format_number(v) for v in query_values(value))}"


def build_endpoint(path: str, operation: Union[Operation, str], value: Any) -> str:
    """Build ``/<path>/<suffix>/?<param>=<value>`` for a distribution query.

    >>> build_endpoint("1d/dists/abc", "pdf", [-1, 0, 1.5])
    '/1d/dists/abc/pdf/?x=-1,0,1.5'
    >>> build_endpoint("/1d/dists/abc/", Operation.SAMPLE, 16)
    '/1d/dists/abc/samples/?size=16'
    """
    op = as_operation(operation)
    return f"{normalize_path(path)}{op.value}/?{query_string(op, value)}"
