from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from .endpoints import Operation
from .errors import MalformedResponse


class CreatedDistribution(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str


class DensityPoint(BaseModel):
    density: float


class CumulativePoint(BaseModel):
    p: float


class QuantilePoint(BaseModel):
    x: float


class SamplesResponse(BaseModel):
    samples: List[Any]


_POINT_ADAPTERS = {
    Operation.DENSITY: (TypeAdapter(List[DensityPoint]), "density"),
    Operation.CUMULATIVE: (TypeAdapter(List[CumulativePoint]), "p"),
    Operation.QUANTILE: (TypeAdapter(List[QuantilePoint]), "x"),
}

_FLOATS = TypeAdapter(List[float])


def _flatten(items: List[Any]) -> List[Any]:
    out: List[Any] = []
    for item in items:
        if isinstance(item, list):
            out.extend(_flatten(item))
        else:
            out.append(item)
    return out


def parse_created(data: Any) -> CreatedDistribution:
    try:
        return CreatedDistribution.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponse(f"distribution creation response lacks an id: {data!r}") from exc


def extract_values(operation: Operation, data: Any, expected: Optional[int] = None) -> List[float]:
    """Pull the numeric results for ``operation`` out of a decoded response body.

    When ``expected`` is given the response must hold exactly that many points.
    """
    try:
        if operation is Operation.SAMPLE:
            samples = SamplesResponse.model_validate(data).samples
            values = _FLOATS.validate_python(_flatten(samples))
        else:
            adapter, field_name = _POINT_ADAPTERS[operation]
            values = [getattr(point, field_name) for point in adapter.validate_python(data)]
    except ValidationError as exc:
        raise MalformedResponse(f"unexpected {operation.value} response: {exc}") from exc
    if expected is not None and len(values) != expected:
        raise MalformedResponse(f"expected {expected} values, got {len(values)}")
    return values

