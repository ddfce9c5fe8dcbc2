"""Fixed-width single-precision float lane vectors.

Every lane holds an IEEE-754 single-precision value. Results of
arithmetic are rounded to single precision lane by lane. Conversions to
integer lanes saturate the way numeric casts do: NaN becomes zero and
out-of-range values clamp to the target range.
"""

import math
import struct
from typing import Callable, ClassVar, Iterable, Iterator, List, Optional, Tuple

from tilekit.lanes_int import I32x8, M32x4, M32x8, U32x4, U32x8, _Lanes

_U32_MAX = 0xFFFF_FFFF


def _f32(value: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _bits_of(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _float_of(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits & _U32_MAX))[0]


def _div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _min(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _max(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def _clamp(value: float, lo: float, hi: float) -> float:
    if not lo <= hi:
        raise ValueError(f"clamp bounds out of order: {lo} > {hi}")
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def _sqrt(value: float) -> float:
    if math.isnan(value) or value < 0.0:
        return math.nan
    return math.sqrt(value)


def _to_u32(value: float) -> int:
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= 4294967296.0:
        return _U32_MAX
    return int(value)


def _round_to_u8(value: float) -> int:
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= 255.0:
        return 255
    return min(int(math.floor(value + 0.5)), 255)


class U8x8(_Lanes):
    """Eight unsigned 8-bit lanes."""

    LANES = 8
    BITS = 8
    __slots__ = ()

    @classmethod
    def from_f32x8(cls, val: "F32x8") -> "U8x8":
        """Round every lane to the nearest integer, saturating to ``0..=255``."""
        if type(val) is not F32x8:
            raise TypeError("from_f32x8 takes an F32x8")
        return cls(_round_to_u8(v) for v in val)

    def to_array(self) -> List[int]:
        """Return the lanes as a list."""
        return list(self._lanes)


class _FloatLanes:
    """Common behaviour of single-precision lane vectors."""

    LANES: ClassVar[int] = 0
    _MASK: ClassVar[type] = M32x8
    _BITS_TYPE: ClassVar[type] = U32x8

    __slots__ = ("_lanes",)

    def __init__(self, values: Optional[Iterable[float]] = None):
        if values is None:
            self._lanes: Tuple[float, ...] = (0.0,) * self.LANES
            return
        lanes = tuple(values)
        if len(lanes) != self.LANES:
            raise ValueError(
                f"{type(self).__name__} needs {self.LANES} lanes, got {len(lanes)}"
            )
        for value in lanes:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(
                    f"lane values must be numbers, not {type(value).__name__}"
                )
        self._lanes = tuple(_f32(v) for v in lanes)

    @classmethod
    def _make(cls, values: Iterable[float]):
        vector = cls.__new__(cls)
        vector._lanes = tuple(_f32(v) for v in values)
        return vector

    @classmethod
    def _splat_lanes(cls, val: float):
        return cls((val,) * cls.LANES)

    @classmethod
    def _from_bits_lanes(cls, val):
        if type(val) is not cls._BITS_TYPE:
            raise TypeError(f"from_bits takes a {cls._BITS_TYPE.__name__}")
        vector = cls.__new__(cls)
        vector._lanes = tuple(_float_of(b) for b in val)
        return vector

    def _to_bits_lanes(self):
        return self._BITS_TYPE(_bits_of(v) for v in self._lanes)

    def to_array(self) -> List[float]:
        """Return the lanes as a list."""
        return list(self._lanes)

    def _check(self, other, name: str) -> None:
        if type(other) is not type(self):
            raise TypeError(f"{name} operand must be {type(self).__name__}")

    def _compare(self, other, op: Callable[[float, float], bool]):
        return self._MASK.from_bools(op(a, b) for a, b in zip(self._lanes, other._lanes))

    def _binary(self, other, op: Callable[[float, float], float]):
        if type(other) is not type(self):
            return NotImplemented
        return self._make(op(a, b) for a, b in zip(self._lanes, other._lanes))

    def _le_lanes(self, other):
        self._check(other, "le")
        return self._compare(other, lambda a, b: a <= b)

    def _select_lanes(self, other, mask):
        self._check(other, "select")
        if type(mask) is not self._MASK:
            raise TypeError(f"select mask must be {self._MASK.__name__}")
        return self._make(
            a if m == _U32_MAX else b for a, b, m in zip(self._lanes, other._lanes, mask)
        )

    def _clamp_lanes(self, lo, hi):
        self._check(lo, "clamp")
        self._check(hi, "clamp")
        return self._make(
            _clamp(v, a, b) for v, a, b in zip(self._lanes, lo._lanes, hi._lanes)
        )

    def _sqrt_lanes(self):
        return self._make(_sqrt(v) for v in self._lanes)

    def _mul_add_lanes(self, a, b):
        self._check(a, "mul_add")
        self._check(b, "mul_add")
        return self._make(
            x * y + z for x, y, z in zip(self._lanes, a._lanes, b._lanes)
        )

    def __iter__(self) -> Iterator[float]:
        return iter(self._lanes)

    def __len__(self) -> int:
        return self.LANES

    def __getitem__(self, index):
        return self._lanes[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._lanes)})"


class F32x4(_FloatLanes):
    """Four single-precision lanes."""

    LANES = 4
    _MASK = M32x4
    _BITS_TYPE = U32x4
    __slots__ = ()

    @classmethod
    def splat(cls, val: float) -> "F32x4":
        """Return a vector with every lane set to ``val``."""
        return cls._splat_lanes(val)

    @classmethod
    def from_bits(cls, val: U32x4) -> "F32x4":
        """Reinterpret unsigned 32-bit lanes as floats."""
        return cls._from_bits_lanes(val)

    def to_bits(self) -> U32x4:
        """Reinterpret the lanes as unsigned 32-bit integers."""
        return self._to_bits_lanes()

    def set(self, index: int, val: float) -> "F32x4":
        """Return a copy with lane ``index`` replaced by ``val``."""
        if not 0 <= index < self.LANES:
            raise IndexError(f"lane index {index} out of range 0..{self.LANES}")
        lanes = list(self._lanes)
        lanes[index] = val
        return self._make(lanes)

    def le(self, other: "F32x4") -> M32x4:
        """Lane-wise ``<=`` as a mask; false where either lane is NaN."""
        return self._le_lanes(other)

    def select(self, other: "F32x4", mask: M32x4) -> "F32x4":
        """Take lanes from ``self`` where ``mask`` is set, else from ``other``."""
        return self._select_lanes(other, mask)

    def clamp(self, lo: "F32x4", hi: "F32x4") -> "F32x4":
        """Clamp every lane into ``lo..=hi``; NaN lanes stay NaN."""
        return self._clamp_lanes(lo, hi)

    def sqrt(self) -> "F32x4":
        """Lane-wise square root; negative lanes give NaN."""
        return self._sqrt_lanes()

    def mul_add(self, a: "F32x4", b: "F32x4") -> "F32x4":
        """Return ``self * a + b`` lane by lane with a single rounding."""
        return self._mul_add_lanes(a, b)

    def __add__(self, other):
        return self._binary(other, lambda a, b: a + b)

    def __mul__(self, other):
        return self._binary(other, lambda a, b: a * b)


class F32x8(_FloatLanes):
    """Eight single-precision lanes."""

    LANES = 8
    _MASK = M32x8
    _BITS_TYPE = U32x8
    __slots__ = ()

    @classmethod
    def splat(cls, val: float) -> "F32x8":
        """Return a vector with every lane set to ``val``."""
        return cls._splat_lanes(val)

    @classmethod
    def indexed(cls) -> "F32x8":
        """Return the vector ``[0.0, 1.0, ..., 7.0]``."""
        return cls(float(i) for i in range(cls.LANES))

    @classmethod
    def from_array(cls, values: Iterable[float]) -> "F32x8":
        """Build a vector from eight numbers."""
        return cls(values)

    @classmethod
    def from_bits(cls, val: U32x8) -> "F32x8":
        """Reinterpret unsigned 32-bit lanes as floats."""
        return cls._from_bits_lanes(val)

    @classmethod
    def from_i32x8(cls, val: I32x8) -> "F32x8":
        """Convert signed 32-bit lanes to the nearest floats."""
        if type(val) is not I32x8:
            raise TypeError("from_i32x8 takes an I32x8")
        return cls._make(float(v) for v in val)

    def to_bits(self) -> U32x8:
        """Reinterpret the lanes as unsigned 32-bit integers."""
        return self._to_bits_lanes()

    def to_array(self) -> List[float]:
        """Return the lanes as a list."""
        return list(self._lanes)

    def to_u32x8(self) -> U32x8:
        """Truncate every lane toward zero, saturating to the u32 range."""
        return U32x8(_to_u32(v) for v in self._lanes)

    def eq(self, other: "F32x8") -> M32x8:
        """Lane-wise equality as a mask; NaN equals nothing."""
        self._check(other, "eq")
        return self._compare(other, lambda a, b: a == b)

    def lt(self, other: "F32x8") -> M32x8:
        """Lane-wise ``<`` as a mask."""
        self._check(other, "lt")
        return self._compare(other, lambda a, b: a < b)

    def le(self, other: "F32x8") -> M32x8:
        """Lane-wise ``<=`` as a mask; false where either lane is NaN."""
        return self._le_lanes(other)

    def select(self, other: "F32x8", mask: M32x8) -> "F32x8":
        """Take lanes from ``self`` where ``mask`` is set, else from ``other``."""
        return self._select_lanes(other, mask)

    def abs(self) -> "F32x8":
        """Lane-wise absolute value."""
        return self._make(abs(v) for v in self._lanes)

    def min(self, other: "F32x8") -> "F32x8":
        """Lane-wise minimum; a NaN lane yields the other operand."""
        self._check(other, "min")
        return self._make(_min(a, b) for a, b in zip(self._lanes, other._lanes))

    def max(self, other: "F32x8") -> "F32x8":
        """Lane-wise maximum; a NaN lane yields the other operand."""
        self._check(other, "max")
        return self._make(_max(a, b) for a, b in zip(self._lanes, other._lanes))

    def clamp(self, lo: "F32x8", hi: "F32x8") -> "F32x8":
        """Clamp every lane into ``lo..=hi``; NaN lanes stay NaN."""
        return self._clamp_lanes(lo, hi)

    def sqrt(self) -> "F32x8":
        """Lane-wise square root; negative lanes give NaN."""
        return self._sqrt_lanes()

    def recip(self) -> "F32x8":
        """Lane-wise reciprocal."""
        return self._make(_div(1.0, v) for v in self._lanes)

    def mul_add(self, a: "F32x8", b: "F32x8") -> "F32x8":
        """Return ``self * a + b`` lane by lane with a single rounding."""
        return self._mul_add_lanes(a, b)

    def __add__(self, other):
        return self._binary(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._binary(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._binary(other, lambda a, b: a * b)

    def __truediv__(self, other):
        return self._binary(other, _div)

    def __neg__(self) -> "F32x8":
        return self._make(-v for v in self._lanes)

    def __or__(self, other):
        if type(other) is not F32x8:
            return NotImplemented
        vector = F32x8.__new__(F32x8)
        vector._lanes = tuple(
            _float_of(_bits_of(a) | _bits_of(b)) for a, b in zip(self._lanes, other._lanes)
        )
        return vector