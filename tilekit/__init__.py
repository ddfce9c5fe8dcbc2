"""Building blocks for tile-based 2D rasterizers: bit helpers, layer orders, bit sets, tuple extension, prefix-scan iteration and lane vectors."""

__version__ = "0.1.0"
__all__ = [
    "bits",
    "order",
    "small_bit_set",
    "extend",
    "prefix_scan",
    "lanes_int",
    "lanes_float",
]