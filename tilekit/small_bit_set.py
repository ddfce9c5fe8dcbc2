"""A set of small integers packed into a 32-bit word."""

_CAPACITY = 32


class SmallBitSet:
    """A set holding integers in ``0..32``."""

    __slots__ = ("_bits",)

    def __init__(self):
        self._bits = 0

    def clear(self) -> None:
        """Remove every element."""
        self._bits = 0

    def __contains__(self, val) -> bool:
        if not 0 <= val < _CAPACITY:
            return False
        return bool((self._bits >> val) & 1)

    def insert(self, val: int) -> bool:
        """Add ``val``; return False if it does not fit in the set."""
        if not 0 <= val < _CAPACITY:
            return False
        self._bits |= 1 << val
        return True

    def remove(self, val: int) -> bool:
        """Remove ``val``; return False if it does not fit in the set."""
        if not 0 <= val < _CAPACITY:
            return False
        self._bits &= ~(1 << val)
        return True

    def first_empty_slot(self):
        """Claim the lowest slot above the run of set low bits, or None if full."""
        slot = 0
        while (self._bits >> slot) & 1:
            slot += 1
        return slot if self.insert(slot) else None

    def __eq__(self, other):
        if not isinstance(other, SmallBitSet):
            return NotImplemented
        return self._bits == other._bits

    def __repr__(self) -> str:
        members = [i for i in range(_CAPACITY) if (self._bits >> i) & 1]
        return f"SmallBitSet({members})"