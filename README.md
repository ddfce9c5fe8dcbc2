# tilekit

Small, dependency-free building blocks for writing a tile-based 2D
rasterizer in Python.

## What is inside

- `tilekit.bits`
  - `to_canon_bits(value)` returns the single-precision bit pattern of a
    float. Every NaN maps to one canonical pattern, and `-0.0` maps to the
    bits of `0.0`.
  - `div_ceil(a, b)` divides two non-negative integers and rounds up. It
    raises `ValueError` for negative operands.
- `tilekit.order`
  - `Order(value)` is a layer order in `0..=LAYER_LIMIT`, with
    `LAYER_LIMIT = 2**21 - 1` and `Order.MAX` as the largest order.
  - Orders support `int()`, indexing, hashing and comparison. They sort in
    descending numeric order, so a higher order sorts first.
  - A value out of range raises `OrderError`, a subclass of `ValueError`.
    A non-int value raises `TypeError`.
- `tilekit.small_bit_set`
  - `SmallBitSet` holds integers in `0..32`. It has `insert`, `remove`,
    `clear` and `in`.
  - `insert` and `remove` return `False` for values that do not fit.
  - `first_empty_slot()` claims the slot just above the run of set low
    bits. It returns `None` when the set is full.
- `tilekit.extend`
  - `ExtendTuple(*lists).extend(items)` unzips an iterable of tuples into
    the given lists, one list per tuple field.
  - A tuple of the wrong width raises `ValueError`, and the lists are
    left unchanged.
- `tilekit.prefix_scan`
  - `PrefixScanIter(sums)` walks an inclusive prefix-sum table and yields
    `(group, local_index)` pairs. It skips empty groups.
  - It can be consumed from the front with `next()` and from the back with
    `next_back()` or `reversed()`.
  - `len()` gives the number of pairs left.
  - `split_at(index)` splits it into two independent iterators.
- `tilekit.lanes_int`
  - Fixed-width integer lane vectors: `I8x16`, `I16x16`, `I32x8`, `U32x4`,
    `U32x8` and `U8x32`.
  - Masks: `M8x16`, `M32x4` and `M32x8`.
  - Constructors reject lane values outside the type's range.
  - Lane-wise arithmetic wraps around on overflow.
  - `I8x16.widen()` and `I16x16.widen()` sign-extend into two `I32x8`.
  - `U8x32.from_u32_interleaved` interleaves the low bytes of four `U32x8`.
- `tilekit.lanes_float`
  - Single-precision lane vectors `F32x4` and `F32x8`, plus `U8x8`.
  - Every result is rounded to single precision lane by lane.
  - `F32x8.to_u32x8()` truncates toward zero and saturates; NaN becomes 0.
  - `U8x8.from_f32x8()` rounds to the nearest integer and saturates to
    `0..=255`.

## Installation

```
pip install tilekit
```

## Examples

```python
from tilekit.prefix_scan import PrefixScanIter

list(PrefixScanIter([2, 5]))
# [(0, 0), (0, 1), (1, 0), (1, 1), (1, 2)]
```

```python
from tilekit.extend import ExtendTuple

xs, ys = [], []
ExtendTuple(xs, ys).extend((i, i * i) for i in range(3))
# xs == [0, 1, 2], ys == [0, 1, 4]
```

```python
from tilekit.small_bit_set import SmallBitSet

slots = SmallBitSet()
slots.first_empty_slot()  # 0
slots.first_empty_slot()  # 1
```

```python
from tilekit.lanes_float import F32x8

F32x8.indexed().to_array()
# [0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0]
```

## What it does not do

tilekit is a set of helpers only. It has no paths, no compositions, no
renderer and no command-line tool. Everything runs sequentially in the
calling thread.

## Running the tests

```
pip install -e ".[test]"
pytest
```