from __future__ import annotations
from .cursor import ByteCursor, MisuseError

ESCAPE = 0x5C  # "\"


def _as_text(raw: bytes) -> str:
    # latin-1 maps every byte to the code point of the same value, so no byte
    # is dropped or rejected
    return raw.decode("latin-1")


def take_bytes(cur: ByteCursor, n: int) -> bytes:
    """Copy of the first min(n, remaining) bytes; empty once exhausted."""
    return cur.take(n)


def take_remaining(cur: ByteCursor) -> bytes:
    return cur.take(cur.remaining())


def take_text(cur: ByteCursor, n: int) -> str:
    return _as_text(cur.take(n))


def take_escaped_text(cur: ByteCursor, max_length: int) -> str:
    """
    Read up to `max_length` characters from the front.

    A backslash followed by another backslash emits one literal backslash.
    A backslash followed by anything else ends the string; both bytes are
    consumed and neither is emitted. A lone trailing backslash is emitted
    as-is. Reading stops early when the buffer runs out.
    """
    if max_length < 0:
        raise MisuseError(f"negative max_length: {max_length}")

    out = bytearray()
    for _ in range(max_length):
        if cur.exhausted():
            break
        b = cur.take_byte()
        if b == ESCAPE and not cur.exhausted():
            b = cur.take_byte()
            if b != ESCAPE:
                break
        out.append(b)
    return _as_text(bytes(out))
