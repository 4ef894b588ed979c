import math
import struct

MAX_U32 = (1 << 32) - 1
MAX_U64 = (1 << 64) - 1

# largest finite binary32 value, 0x7f7fffff
FLOAT32_MAX = struct.unpack(">f", bytes.fromhex("7f7fffff"))[0]


def to_float32(x: float) -> float:
    """
    Round a binary64 value to the nearest binary32 value (ties to even).
    Values past the binary32 range become signed infinity, NaN stays NaN.
    """
    try:
        return struct.unpack(">f", struct.pack(">f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def to_uint64(v: int) -> int:
    """Reinterpret a Python int as an unsigned 64-bit quantity."""
    return v & MAX_U64


def float32_toward(x: float, target: float) -> float:
    """Adjacent binary32 value after `x` in the direction of `target`."""
    if x == target:
        return x
    if x == 0.0:
        return math.copysign(2.0 ** -149, target)
    bits = struct.unpack(">I", struct.pack(">f", x))[0]
    bits += 1 if (x < target) == (x > 0) else -1
    return struct.unpack(">f", struct.pack(">I", bits))[0]
