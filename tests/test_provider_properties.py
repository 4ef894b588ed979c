"""Property tests for the provider: length accounting, determinism, range containment."""
import math

from hypothesis import given, settings
from hypothesis import strategies as st

from fuzzdata.binary.provider import FuzzedDataProvider, MisuseError
from fuzzdata.binary.scale import FLOAT32_MAX, float32_toward, to_float32
from fuzzdata.models.common import INT8, INT64, UINT64

int64s = st.integers(min_value=INT64.min_value, max_value=INT64.max_value)
finite64 = st.floats(allow_nan=False, allow_infinity=False)
finite32 = st.floats(allow_nan=False, allow_infinity=False, width=32)
# binary64 values inside the binary32 range, mostly not representable in binary32
near32 = st.floats(min_value=-FLOAT32_MAX, max_value=FLOAT32_MAX)


def _run_script(fdp: FuzzedDataProvider) -> list:
    return [
        fdp.consume_bool(),
        fdp.consume_int16(),
        fdp.consume_random_length_string(8),
        fdp.consume_float64_in_range(-1.0, 1.0),
        fdp.consume_bytes(3),
        fdp.consume_uint64(),
        fdp.consume_float32(),
        fdp.consume_remaining_bytes(),
    ]


@given(data=st.binary(max_size=64), n=st.integers(min_value=0, max_value=80))
def test_consume_bytes_length(data, n):
    fdp = FuzzedDataProvider(data)
    fdp.consume_uint8()
    before = fdp.remaining()
    out = fdp.consume_bytes(n)
    assert len(out) == min(n, before)
    assert fdp.remaining() == before - len(out)


@given(data=st.binary(max_size=64))
def test_same_input_same_output(data):
    assert _run_script(FuzzedDataProvider(data)) == _run_script(FuzzedDataProvider(data))


@given(data=st.binary(max_size=32), a=int64s, b=int64s)
def test_int64_in_range_is_contained(data, a, b):
    lo, hi = min(a, b), max(a, b)
    assert lo <= FuzzedDataProvider(data).consume_int64_in_range(lo, hi) <= hi


@given(data=st.binary(max_size=16), a=st.integers(-128, 127), b=st.integers(-128, 127))
def test_int8_in_range_is_contained(data, a, b):
    lo, hi = min(a, b), max(a, b)
    fdp = FuzzedDataProvider(data)
    v = fdp.consume_int8_in_range(lo, hi)
    assert lo <= v <= hi
    assert INT8.contains(v)
    assert fdp.remaining() >= len(data) - 1


@given(data=st.binary(max_size=32), a=finite64, b=finite64)
def test_float64_in_range_is_contained(data, a, b):
    lo, hi = min(a, b), max(a, b)
    v = FuzzedDataProvider(data).consume_float64_in_range(lo, hi)
    assert math.isfinite(v)
    assert lo <= v <= hi


@given(data=st.binary(max_size=32), a=finite32 | near32, b=finite32 | near32)
def test_float32_in_range_is_contained(data, a, b):
    lo, hi = min(a, b), max(a, b)
    try:
        v = FuzzedDataProvider(data).consume_float32_in_range(lo, hi)
    except MisuseError:
        # only allowed when no binary32 value lies between the bounds
        first = to_float32(lo)
        if first < lo:
            first = float32_toward(first, math.inf)
        assert first > hi
        return
    assert to_float32(v) == v
    assert lo <= v <= hi


@given(data=st.binary(max_size=32))
@settings(max_examples=50)
def test_probability_in_unit_interval(data):
    fdp = FuzzedDataProvider(data)
    assert 0.0 <= fdp.consume_probability_float32() <= 1.0
    assert 0.0 <= fdp.consume_probability_float64() <= 1.0


@given(data=st.binary(max_size=32))
def test_exhausted_provider_returns_fallbacks(data):
    fdp = FuzzedDataProvider(data)
    fdp.consume_remaining_bytes()
    assert fdp.remaining() == 0
    assert fdp.consume_int64_in_range(-5, 5) == -5
    assert fdp.consume_uint64() == UINT64.min_value
    assert fdp.consume_int8() == INT8.min_value
    assert fdp.consume_float64_in_range(2.5, 7.0) == 2.5
    assert fdp.consume_bool() is False
    assert fdp.consume_probability_float64() == 0.0
    assert fdp.consume_bytes(4) == b""
    assert fdp.consume_random_length_string(4) == ""
    assert fdp.consume_bytes_as_string(4) == ""


@given(head=st.binary(max_size=16), tail=st.binary(min_size=8, max_size=8))
def test_tail_decode_ignores_front_reads(head, tail):
    a = FuzzedDataProvider(head + tail)
    a.consume_bytes(len(head))
    b = FuzzedDataProvider(tail)
    assert a.consume_uint64() == b.consume_uint64()
