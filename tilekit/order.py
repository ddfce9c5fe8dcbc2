"""Layer order values bounded by the layer limit."""

from functools import total_ordering

LAYER_LIMIT = (1 << 21) - 1


class OrderError(ValueError):
    """Raised when an order value exceeds the layer limit."""

    def __init__(self, message: str = f"exceeded layer limit ({LAYER_LIMIT})"):
        super().__init__(message)


@total_ordering
class Order:
    """A layer order in ``0..=LAYER_LIMIT``.

    Orders compare in descending numeric order: a higher layer order
    sorts before a lower one.
    """

    __slots__ = ("_value",)

    MAX: "Order"

    def __init__(self, value: int = 0):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"order must be an int, not {type(value).__name__}")
        if value < 0 or value > LAYER_LIMIT:
            raise OrderError()
        self._value = value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Order):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, Order):
            return NotImplemented
        return self._value > other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Order({self._value})"


Order.MAX = Order(LAYER_LIMIT)