from __future__ import annotations
from .cursor import ByteCursor, MisuseError
from fuzzdata.binary.scale import MAX_U64, to_uint64
from fuzzdata.models.common import IntegralType, UINT8


def _check_bounds(kind: IntegralType, min_val: int, max_val: int) -> None:
    for v in (min_val, max_val):
        if not isinstance(v, int):
            raise MisuseError(f"{kind.name} bound must be an int, got {v!r}")
    if not (kind.contains(min_val) and kind.contains(max_val)):
        raise MisuseError(
            f"{kind.name} range [{min_val}, {max_val}] outside "
            f"[{kind.min_value}, {kind.max_value}]"
        )
    if min_val > max_val:
        raise MisuseError(f"min_val > max_val: {min_val} > {max_val}")


def decode_integral_in_range(cur: ByteCursor, kind: IntegralType, min_val: int, max_val: int) -> int:
    """
    Map trailing bytes to an integer in [min_val, max_val].

    Bytes are taken from the back of the view, last byte first, and shifted
    in big-endian order. Only as many bytes as the span needs are used, never
    more than the width of `kind`. With no bytes left the result is min_val.
    The modulo reduction biases the result slightly; that is accepted.
    """
    _check_bounds(kind, min_val, max_val)

    span = to_uint64(max_val - min_val)
    result = 0
    offset = 0
    for _ in range(kind.nbytes):
        if (span >> offset) == 0 or cur.exhausted():
            break
        result = (result << 8) | cur.pop_tail()
        offset += 8

    # full 64-bit span: span + 1 would wrap to zero
    if span != MAX_U64:
        result %= span + 1

    return min_val + result


def decode_integral(cur: ByteCursor, kind: IntegralType) -> int:
    return decode_integral_in_range(cur, kind, kind.min_value, kind.max_value)


def decode_bool(cur: ByteCursor) -> bool:
    """Low bit of one tail byte; False when exhausted."""
    return bool(decode_integral(cur, UINT8) & 1)
