from __future__ import annotations
import sys
from pydantic import BaseModel, ConfigDict, Field, field_validator

from fuzzdata.binary.scale import to_float32, FLOAT32_MAX


class IntegralType(BaseModel):
    """Fixed-width integer descriptor (two's complement when signed)."""
    model_config = ConfigDict(frozen=True)

    name: str
    bits: int = Field(..., ge=8, le=64)
    signed: bool = False

    @field_validator("bits")
    @classmethod
    def _whole_bytes(cls, v: int) -> int:
        if v not in (8, 16, 32, 64):
            raise ValueError(f"unsupported integer width: {v}")
        return v

    @property
    def nbytes(self) -> int: return self.bits // 8

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, v: int) -> bool:
        return self.min_value <= v <= self.max_value


class FloatType(BaseModel):
    """IEEE-754 binary floating type; Python floats are binary64."""
    model_config = ConfigDict(frozen=True)

    name: str
    bits: int

    @field_validator("bits")
    @classmethod
    def _known_width(cls, v: int) -> int:
        if v not in (32, 64):
            raise ValueError(f"unsupported float width: {v}")
        return v

    @property
    def max_finite(self) -> float:
        return FLOAT32_MAX if self.bits == 32 else sys.float_info.max

    def round(self, x: float) -> float:
        """Round a binary64 result to this width."""
        return to_float32(x) if self.bits == 32 else float(x)


INT8   = IntegralType(name="int8",   bits=8,  signed=True)
INT16  = IntegralType(name="int16",  bits=16, signed=True)
INT32  = IntegralType(name="int32",  bits=32, signed=True)
INT64  = IntegralType(name="int64",  bits=64, signed=True)
UINT8  = IntegralType(name="uint8",  bits=8)
UINT16 = IntegralType(name="uint16", bits=16)
UINT32 = IntegralType(name="uint32", bits=32)
UINT64 = IntegralType(name="uint64", bits=64)

# platform-width pair; always 64 bits here
INT  = IntegralType(name="int",  bits=64, signed=True)
UINT = IntegralType(name="uint", bits=64)

FLOAT32 = FloatType(name="float32", bits=32)
FLOAT64 = FloatType(name="float64", bits=64)
