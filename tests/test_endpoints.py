import math

import pytest

from makedistribution.endpoints import Operation, as_operation, build_endpoint, normalize_path
from makedistribution.errors import InvalidArgument, InvalidOperation


@pytest.mark.parametrize(
    "raw",
    ["1d/dists/abc", "/1d/dists/abc", "1d/dists/abc/", "//1d/dists/abc//"],
)
def test_normalize_path_forces_single_slashes(raw):
    assert normalize_path(raw) == "/1d/dists/abc/"


def test_density_values_are_comma_joined_in_order():
    assert build_endpoint("/1d/dists/abc", "pdf", [-1, 0, 1.5]) == "/1d/dists/abc/pdf/?x=-1,0,1.5"


def test_parameter_names_per_operation():
    assert build_endpoint("d", Operation.DENSITY, [1]) == "/d/pdf/?x=1"
    assert build_endpoint("d", Operation.CUMULATIVE, [1]) == "/d/cdf/?x=1"
    assert build_endpoint("d", Operation.QUANTILE, [0.1, 0.9]) == "/d/qf/?p=0.1,0.9"


def test_sample_size_is_embedded_directly():
    assert build_endpoint("/1d/dists/abc", "samples", 16) == "/1d/dists/abc/samples/?size=16"
    assert build_endpoint("/1d/dists/abc", "sample", 0) == "/1d/dists/abc/samples/?size=0"


def test_operation_names_and_suffixes_are_accepted():
    assert as_operation("density") is Operation.DENSITY
    assert as_operation("QF") is Operation.QUANTILE
    assert as_operation(Operation.SAMPLE) is Operation.SAMPLE


def test_unknown_operation():
    with pytest.raises(InvalidOperation):
        build_endpoint("d", "mgf", [1])


@pytest.mark.parametrize("bad", [[], ["a"], [True], "1,2"])
def test_invalid_query_values(bad):
    with pytest.raises(InvalidArgument):
        build_endpoint("d", "pdf", bad)


@pytest.mark.parametrize("bad", [-1, 2.5, True, [3]])
def test_invalid_sample_size(bad):
    with pytest.raises(InvalidArgument):
        build_endpoint("d", "samples", bad)


def test_scalar_value_and_tuple_input():
    assert build_endpoint("d", "cdf", 0.25) == "/d/cdf/?x=0.25"
    assert build_endpoint("d", "cdf", (3, 1, 2)) == "/d/cdf/?x=3,1,2"


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_values_are_rejected(bad):
    with pytest.raises(InvalidArgument, match="finite"):
        build_endpoint("d", "pdf", [0, bad])


def test_exponents_are_sent_without_plus_sign():
    assert build_endpoint("d", "pdf", [1e16, 2.5e-07]) == "/d/pdf/?x=1e16,2.5e-07"
