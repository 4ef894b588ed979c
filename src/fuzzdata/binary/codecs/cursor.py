from __future__ import annotations


class MisuseError(Exception):
    """Caller bug (bad range, negative length). Never raised for running out of data."""


class ByteCursor:
    """
    Shrinking view over one immutable buffer.

    The view is [head, tail). Front reads advance `head`, numeric decodes
    retreat `tail`; the two ends move independently and never cross.
    """
    __slots__ = ("buf", "head", "tail")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf = bytes(data)
        self.head = 0
        self.tail = len(self.buf)

    def remaining(self) -> int: return self.tail - self.head
    def exhausted(self) -> bool: return self.head == self.tail

    # front (head) consumption
    def take(self, n: int) -> bytes:
        if n < 0: raise MisuseError(f"negative length: {n}")
        end = self.head + min(n, self.remaining())
        out = self.buf[self.head:end]
        self.head = end
        return out

    def take_byte(self) -> int:
        b = self.buf[self.head]
        self.head += 1
        return b

    # back (tail) consumption
    def pop_tail(self) -> int:
        self.tail -= 1
        return self.buf[self.tail]

    def __repr__(self) -> str:
        return f"ByteCursor(head={self.head}, tail={self.tail}, size={len(self.buf)})"
