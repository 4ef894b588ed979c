from __future__ import annotations
import math
from .cursor import ByteCursor, MisuseError
from .integral import decode_bool, decode_integral
from fuzzdata.binary.scale import MAX_U32, MAX_U64, float32_toward
from fuzzdata.models.common import FloatType, UINT32, UINT64


def decode_probability(cur: ByteCursor, kind: FloatType) -> float:
    """
    Value in [0, 1]: a full-width unsigned draw divided by its maximum.
    32-bit floats draw a uint32, 64-bit floats a uint64. 0.0 when exhausted.
    """
    rnd = kind.round
    if kind.bits <= 32:
        return rnd(rnd(float(decode_integral(cur, UINT32))) / rnd(float(MAX_U32)))
    return float(decode_integral(cur, UINT64)) / float(MAX_U64)


def _as_bound(kind: FloatType, v: float) -> float:
    if not isinstance(v, (int, float)):
        raise MisuseError(f"{kind.name} bound must be a number, got {v!r}")
    try:
        f = float(v)
    except OverflowError as e:
        raise MisuseError(f"bad {kind.name} bound {v!r}: {e}") from e
    if not math.isfinite(f) or not math.isfinite(kind.round(f)):
        raise MisuseError(f"{v!r} does not fit in {kind.name}")
    return f


def _inner_bounds(kind: FloatType, lo: float, hi: float) -> tuple[float, float]:
    """Closest values of this width that lie inside [lo, hi]."""
    step = float32_toward if kind.bits == 32 else math.nextafter
    ilo, ihi = kind.round(float(lo)), kind.round(float(hi))
    if ilo < lo:
        ilo = step(ilo, math.inf)
    if ihi > hi:
        ihi = step(ihi, -math.inf)
    if ilo > ihi:
        raise MisuseError(f"no {kind.name} value in [{lo}, {hi}]")
    return ilo, ihi


def decode_float_in_range(cur: ByteCursor, kind: FloatType, min_val: float, max_val: float) -> float:
    """
    Map trailing bytes to a float in [min_val, max_val].

    When the span straddles zero and max_val - min_val would overflow, the
    range is split in two halves of width max/2 - min/2 and one bool picks
    the half. The midpoint formula is kept as written; (max - min) / 2
    rounds differently at extreme magnitudes.

    The result is clamped to the closest representable values inside the
    caller's bounds; a range holding no such value is a MisuseError.
    """
    rnd = kind.round
    fmin, fmax = _as_bound(kind, min_val), _as_bound(kind, max_val)
    if min_val > max_val:
        raise MisuseError(f"min_val > max_val: {min_val} > {max_val}")
    lo, hi = _inner_bounds(kind, min_val, max_val)
    min_val, max_val = rnd(fmin), rnd(fmax)

    result = min_val
    if max_val > 0 and min_val < 0 and max_val > rnd(min_val + kind.max_finite):
        half = rnd(rnd(max_val / 2.0) - rnd(min_val / 2.0))
        if decode_bool(cur):
            result = rnd(result + half)
        span = half
    else:
        span = rnd(max_val - min_val)

    result = rnd(result + rnd(span * decode_probability(cur, kind)))
    # rounding of the bounds, the span and the final sum can each overshoot
    return min(max(result, lo), hi)


def decode_float(cur: ByteCursor, kind: FloatType) -> float:
    """Over [-max_finite, +max_finite]."""
    return decode_float_in_range(cur, kind, -kind.max_finite, kind.max_finite)
