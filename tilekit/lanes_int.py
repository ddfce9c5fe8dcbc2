"""Fixed-width integer lane vectors and lane masks.

Every vector holds a fixed number of lanes of one integer type. The
constructor rejects values outside that type's range. Arithmetic wraps
around on overflow the way machine integers do.
"""

from typing import Callable, ClassVar, Iterable, Iterator, List, Optional, Sequence, Tuple


class _Lanes:
    """Common behaviour of all lane vectors."""

    LANES: ClassVar[int] = 0
    BITS: ClassVar[int] = 32
    SIGNED: ClassVar[bool] = False

    __slots__ = ("_lanes",)

    def __init__(self, lanes: Optional[Iterable[int]] = None):
        if lanes is None:
            self._lanes: Tuple[int, ...] = (0,) * self.LANES
            return
        values = tuple(lanes)
        if len(values) != self.LANES:
            raise ValueError(
                f"{type(self).__name__} needs {self.LANES} lanes, got {len(values)}"
            )
        lo, hi = self._bounds()
        for value in values:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"lane values must be int, not {type(value).__name__}")
            if not lo <= value <= hi:
                raise ValueError(
                    f"lane value {value} out of range {lo}..={hi} for {type(self).__name__}"
                )
        self._lanes = values

    @classmethod
    def _bounds(cls) -> Tuple[int, int]:
        if cls.SIGNED:
            half = 1 << (cls.BITS - 1)
            return -half, half - 1
        return 0, (1 << cls.BITS) - 1

    @classmethod
    def _wrap(cls, value: int) -> int:
        value &= (1 << cls.BITS) - 1
        if cls.SIGNED and value >= 1 << (cls.BITS - 1):
            value -= 1 << cls.BITS
        return value

    @classmethod
    def _from_wrapped(cls, values: Iterable[int]):
        vector = cls.__new__(cls)
        vector._lanes = tuple(cls._wrap(v) for v in values)
        if len(vector._lanes) != cls.LANES:
            raise ValueError(f"{cls.__name__} needs {cls.LANES} lanes")
        return vector

    @classmethod
    def _splat_lanes(cls, val: int):
        return cls((val,) * cls.LANES)

    def to_array(self) -> List[int]:
        """Return the lanes as a list."""
        return list(self._lanes)

    def _lanewise(self, other, op: Callable[[int, int], int]):
        if type(other) is not type(self):
            return NotImplemented
        return self._from_wrapped(op(a, b) for a, b in zip(self._lanes, other._lanes))

    def __iter__(self) -> Iterator[int]:
        return iter(self._lanes)

    def __len__(self) -> int:
        return self.LANES

    def __getitem__(self, index):
        return self._lanes[index]

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._lanes == other._lanes

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._lanes))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._lanes)})"


class _Mask(_Lanes):
    """A vector whose lanes are all-ones (true) or zero (false)."""

    __slots__ = ()

    @classmethod
    def from_bools(cls, flags: Iterable[bool]):
        """Build a mask with all-ones lanes where ``flags`` is true."""
        full = (1 << cls.BITS) - 1
        return cls._from_wrapped(full if flag else 0 for flag in flags)

    def _all_set(self) -> bool:
        full = (1 << self.BITS) - 1
        return all(v == full for v in self._lanes)

    def all(self) -> bool:
        """True when every lane is all-ones."""
        return self._all_set()


class M8x16(_Mask):
    """Sixteen 8-bit mask lanes."""

    LANES = 16
    BITS = 8
    __slots__ = ()

    def all(self) -> bool:
        """True when every lane is all-ones."""
        return self._all_set()


class M32x4(_Mask):
    """Four 32-bit mask lanes."""

    LANES = 4
    BITS = 32
    __slots__ = ()


class M32x8(_Mask):
    """Eight 32-bit mask lanes."""

    LANES = 8
    BITS = 32
    __slots__ = ()

    def all(self) -> bool:
        """True when every lane is all-ones."""
        return self._all_set()

    def any(self) -> bool:
        """True when at least one lane is all-ones."""
        full = (1 << self.BITS) - 1
        return any(v == full for v in self._lanes)

    def __invert__(self) -> "M32x8":
        return self._from_wrapped(~v for v in self._lanes)

    def __or__(self, other):
        return self._lanewise(other, lambda a, b: a | b)

    def __xor__(self, other):
        return self._lanewise(other, lambda a, b: a ^ b)


class U32x4(_Lanes):
    """Four unsigned 32-bit lanes."""

    LANES = 4
    BITS = 32
    __slots__ = ()

    @classmethod
    def splat(cls, val: int) -> "U32x4":
        """Return a vector with every lane set to ``val``."""
        return cls._splat_lanes(val)

    def to_bytes(self) -> bytes:
        """Return the low byte of every lane."""
        return bytes(v & 0xFF for v in self._lanes)


class U32x8(_Lanes):
    """Eight unsigned 32-bit lanes."""

    LANES = 8
    BITS = 32
    __slots__ = ()

    @classmethod
    def splat(cls, val: int) -> "U32x8":
        """Return a vector with every lane set to ``val``."""
        return cls._splat_lanes(val)

    def to_array(self) -> List[int]:
        """Return the lanes as a list."""
        return list(self._lanes)

    def mul_add(self, a: "U32x8", b: "U32x8") -> "U32x8":
        """Return ``self * a + b`` lane by lane, wrapping on overflow."""
        if type(a) is not U32x8 or type(b) is not U32x8:
            raise TypeError("mul_add operands must be U32x8")
        return self._from_wrapped(
            x * y + z for x, y, z in zip(self._lanes, a._lanes, b._lanes)
        )


class U8x32(_Lanes):
    """Thirty-two unsigned 8-bit lanes."""

    LANES = 32
    BITS = 8
    __slots__ = ()

    @classmethod
    def splat(cls, val: int) -> "U8x32":
        """Return a vector with every lane set to ``val``."""
        return cls._splat_lanes(val)

    @classmethod
    def from_u32_interleaved(cls, vals: Sequence[U32x8]) -> "U8x32":
        """Interleave the low bytes of four ``U32x8`` vectors.

        Lane ``4 * j + i`` of the result is the low byte of lane ``j``
        of ``vals[i]``.
        """
        vectors = tuple(vals)
        if len(vectors) != 4 or any(type(v) is not U32x8 for v in vectors):
            raise TypeError("from_u32_interleaved takes exactly four U32x8 vectors")
        return cls._from_wrapped(
            value & 0xFF for column in zip(*vectors) for value in column
        )


class I32x8(_Lanes):
    """Eight signed 32-bit lanes."""

    LANES = 8
    BITS = 32
    SIGNED = True
    __slots__ = ()

    @classmethod
    def splat(cls, val: int) -> "I32x8":
        """Return a vector with every lane set to ``val``."""
        return cls._splat_lanes(val)

    def eq(self, other: "I32x8") -> M32x8:
        """Lane-wise equality as a mask."""
        if type(other) is not I32x8:
            raise TypeError("eq operand must be I32x8")
        return M32x8.from_bools(a == b for a, b in zip(self._lanes, other._lanes))

    def shr(self, n: int) -> "I32x8":
        """Arithmetic shift right of every lane by ``n`` bits."""
        if not 0 <= n < self.BITS:
            raise ValueError(f"shift amount {n} out of range 0..{self.BITS}")
        return self._from_wrapped(v >> n for v in self._lanes)

    def abs(self) -> "I32x8":
        """Lane-wise absolute value; the minimum value stays unchanged."""
        return self._from_wrapped(abs(v) for v in self._lanes)

    def __add__(self, other):
        return self._lanewise(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._lanewise(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._lanewise(other, lambda a, b: a * b)

    def __and__(self, other):
        return self._lanewise(other, lambda a, b: a & b)


class I8x16(_Lanes):
    """Sixteen signed 8-bit lanes."""

    LANES = 16
    BITS = 8
    SIGNED = True
    __slots__ = ()

    @classmethod
    def splat(cls, val: int) -> "I8x16":
        """Return a vector with every lane set to ``val``."""
        return cls._splat_lanes(val)

    def eq(self, other: "I8x16") -> M8x16:
        """Lane-wise equality as a mask."""
        if type(other) is not I8x16:
            raise TypeError("eq operand must be I8x16")
        return M8x16.from_bools(a == b for a, b in zip(self._lanes, other._lanes))

    def abs(self) -> "I8x16":
        """Lane-wise absolute value; the minimum value stays unchanged."""
        return self._from_wrapped(abs(v) for v in self._lanes)

    def __add__(self, other):
        return self._lanewise(other, lambda a, b: a + b)

    def __and__(self, other):
        return self._lanewise(other, lambda a, b: a & b)

    def widen(self) -> Tuple[I32x8, I32x8]:
        """Sign-extend into two ``I32x8``: lanes 0..8 and lanes 8..16."""
        return I32x8(self._lanes[:8]), I32x8(self._lanes[8:])


class I16x16(_Lanes):
    """Sixteen signed 16-bit lanes."""

    LANES = 16
    BITS = 16
    SIGNED = True
    __slots__ = ()

    @classmethod
    def splat(cls, val: int) -> "I16x16":
        """Return a vector with every lane set to ``val``."""
        return cls._splat_lanes(val)

    def widen(self) -> Tuple[I32x8, I32x8]:
        """Sign-extend into two ``I32x8``: lanes 0..8 and lanes 8..16."""
        return I32x8(self._lanes[:8]), I32x8(self._lanes[8:])