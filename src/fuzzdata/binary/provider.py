from __future__ import annotations

from typing import Sequence, TypeVar, Union

from .codecs.cursor import ByteCursor, MisuseError
from .codecs.strings import take_bytes, take_remaining, take_text, take_escaped_text
from .codecs.integral import decode_integral, decode_integral_in_range, decode_bool
from .codecs.floating import decode_float, decode_float_in_range, decode_probability
from fuzzdata.models.common import (
    INT, INT8, INT16, INT32, INT64,
    UINT, UINT8, UINT16, UINT32, UINT64,
    FLOAT32, FLOAT64,
)

__all__ = ["FuzzedDataProvider", "MisuseError"]

BytesLike = Union[bytes, bytearray, memoryview]
T = TypeVar("T")


class FuzzedDataProvider:
    """
    Deterministic decoder of one fuzz input into typed values.

    Strings and raw bytes are read from the front of the buffer; numbers,
    bools and floats from the back. Running out of data is never an error:
    every call has a fixed fallback (min_val, False, 0.0, empty). Bad
    arguments raise MisuseError.

    Not thread-safe; use one provider per input.
    """

    def __init__(self, data: BytesLike):
        self._cur = ByteCursor(data)

    def remaining(self) -> int:
        return self._cur.remaining()

    # -----------------------------
    # Front: bytes and strings
    # -----------------------------

    def consume_bytes(self, n: int) -> bytes:
        return take_bytes(self._cur, n)

    def consume_remaining_bytes(self) -> bytes:
        return take_remaining(self._cur)

    def consume_bytes_as_string(self, n: int) -> str:
        """Each byte becomes the code point of the same value; no decoding."""
        return take_text(self._cur, n)

    def consume_random_length_string(self, max_length: int) -> str:
        """
        String of 0..max_length characters. A backslash pair yields one
        backslash; a backslash followed by any other byte ends the string.
        """
        return take_escaped_text(self._cur, max_length)

    def consume_remaining_random_length_string(self) -> str:
        return take_escaped_text(self._cur, self._cur.remaining())

    # -----------------------------
    # Back: integers
    # -----------------------------

    def consume_int(self) -> int:    return decode_integral(self._cur, INT)
    def consume_int8(self) -> int:   return decode_integral(self._cur, INT8)
    def consume_int16(self) -> int:  return decode_integral(self._cur, INT16)
    def consume_int32(self) -> int:  return decode_integral(self._cur, INT32)
    def consume_int64(self) -> int:  return decode_integral(self._cur, INT64)
    def consume_uint(self) -> int:   return decode_integral(self._cur, UINT)
    def consume_uint8(self) -> int:  return decode_integral(self._cur, UINT8)
    def consume_uint16(self) -> int: return decode_integral(self._cur, UINT16)
    def consume_uint32(self) -> int: return decode_integral(self._cur, UINT32)
    def consume_uint64(self) -> int: return decode_integral(self._cur, UINT64)

    def consume_int_in_range(self, min_val: int, max_val: int) -> int:
        """
        Integer in [min_val, max_val], not uniformly distributed.
        Returns min_val when no data is left.
        """
        return decode_integral_in_range(self._cur, INT, min_val, max_val)

    def consume_int8_in_range(self, min_val: int, max_val: int) -> int:
        return decode_integral_in_range(self._cur, INT8, min_val, max_val)

    def consume_int16_in_range(self, min_val: int, max_val: int) -> int:
        return decode_integral_in_range(self._cur, INT16, min_val, max_val)

    def consume_int32_in_range(self, min_val: int, max_val: int) -> int:
        return decode_integral_in_range(self._cur, INT32, min_val, max_val)

    def consume_int64_in_range(self, min_val: int, max_val: int) -> int:
        return decode_integral_in_range(self._cur, INT64, min_val, max_val)

    def consume_uint_in_range(self, min_val: int, max_val: int) -> int:
        return decode_integral_in_range(self._cur, UINT, min_val, max_val)

    def consume_uint8_in_range(self, min_val: int, max_val: int) -> int:
        return decode_integral_in_range(self._cur, UINT8, min_val, max_val)

    def consume_uint16_in_range(self, min_val: int, max_val: int) -> int:
        return decode_integral_in_range(self._cur, UINT16, min_val, max_val)

    def consume_uint32_in_range(self, min_val: int, max_val: int) -> int:
        return decode_integral_in_range(self._cur, UINT32, min_val, max_val)

    def consume_uint64_in_range(self, min_val: int, max_val: int) -> int:
        return decode_integral_in_range(self._cur, UINT64, min_val, max_val)

    # -----------------------------
    # Back: floats, probability, bool
    # -----------------------------

    def consume_float32(self) -> float: return decode_float(self._cur, FLOAT32)
    def consume_float64(self) -> float: return decode_float(self._cur, FLOAT64)

    def consume_float32_in_range(self, min_val: float, max_val: float) -> float:
        """Arithmetic is done in binary32; the result never leaves [min_val, max_val]."""
        return decode_float_in_range(self._cur, FLOAT32, min_val, max_val)

    def consume_float64_in_range(self, min_val: float, max_val: float) -> float:
        return decode_float_in_range(self._cur, FLOAT64, min_val, max_val)

    def consume_probability_float32(self) -> float:
        return decode_probability(self._cur, FLOAT32)

    def consume_probability_float64(self) -> float:
        return decode_probability(self._cur, FLOAT64)

    def consume_bool(self) -> bool:
        return decode_bool(self._cur)

    def pick_value_in_list(self, values: Sequence[T]) -> T:
        """One element of `values`, chosen by a tail-read index (first element when exhausted)."""
        if not values:
            raise MisuseError("pick_value_in_list on an empty sequence")
        return values[self.consume_int_in_range(0, len(values) - 1)]

    def __repr__(self) -> str:
        return f"FuzzedDataProvider(remaining={self.remaining()})"
