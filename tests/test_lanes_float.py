import math
import struct

import pytest

from tilekit.lanes_float import F32x4, F32x8, U8x8
from tilekit.lanes_int import I32x8, M32x4, M32x8, U32x4, U32x8

F32_MAX = 3.4028234663852886e38
F32_MIN_POSITIVE = 2.0 ** -126
U32_MAX = 0xFFFF_FFFF


def f32_before(value):
    (bits,) = struct.unpack("<I", struct.pack("<f", value))
    return struct.unpack("<f", struct.pack("<I", bits - 1))[0]


@pytest.mark.parametrize("v", [1.0, 0.0, math.inf, -math.inf])
def test_f32x8_splat(v):
    assert F32x8.splat(v).to_array() == [v] * 8


def test_f32x8_indexed():
    assert F32x8.indexed().to_array() == [float(i) for i in range(8)]


def test_f32x8_from_array():
    value = [-5.0, -4.0, -3.0, -2.0, -1.0, 0.0, 1.0, 2.0]
    assert F32x8.from_array(value).to_array() == value


def test_u32x8_splat():
    assert U32x8.splat(0).to_array() == [0] * 8
    assert U32x8.splat(U32_MAX).to_array() == [U32_MAX] * 8


def test_u32x8_mul_add():
    a = F32x8.from_array([10.0, 20.0, 30.0, 50.0, 70.0, 110.0, 130.0, 170.0]).to_u32x8()
    b = F32x8.from_array([19.0, 23.0, 29.0, 31.0, 37.0, 41.0, 43.0, 47.0]).to_u32x8()
    c = F32x8.from_array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]).to_u32x8()
    assert U32x8.mul_add(a, b, c).to_array() == [191, 462, 873, 1554, 2595, 4516, 5597, 7998]

    a = F32x8.splat(float(0x007F_FFFF)).to_u32x8()
    b = F32x8.splat(float(0x200)).to_u32x8()
    c = F32x8.splat(float(0x1FF)).to_u32x8()
    assert U32x8.mul_add(a, b, c).to_array() == [U32_MAX] * 8


def test_u32x8_from_f32x8_negative_is_zero():
    values = F32x8.from_array(
        [-math.inf, -F32_MAX, -2.5, -1.0, -0.5, -F32_MIN_POSITIVE, -0.0, 0.0]
    ).to_u32x8()
    assert values.to_array() == [0] * 8


def test_u32x8_from_f32x8_below_one_is_zero():
    values = F32x8.from_array(
        [0.0, F32_MIN_POSITIVE, 0.4, 0.5, 0.6, 0.7, 0.8, f32_before(1.0)]
    ).to_u32x8()
    assert values.to_array() == [0] * 8


def test_u32x8_from_f32x8_truncates():
    values = F32x8.from_array(
        [1.0, 1.4, 1.5, f32_before(2.0), 2.0, 2.4, 2.5, f32_before(3.0)]
    ).to_u32x8()
    assert values.to_array() == [1, 1, 1, 1, 2, 2, 2, 2]


def test_u32x8_from_f32x8_large_integers():
    max_int_f32 = 1 << 24
    for value in range(max_int_f32 - 255, max_int_f32):
        assert F32x8.splat(float(value)).to_u32x8().to_array() == [value] * 8


def test_u32x8_from_f32x8_saturates_and_nan():
    values = F32x8.from_array([math.inf, F32_MAX, math.nan, 5e9, 0.0, 0.0, 0.0, 0.0])
    assert values.to_u32x8().to_array()[:4] == [U32_MAX, U32_MAX, 0, U32_MAX]


def test_lanes_round_to_single_precision():
    assert F32x8.splat(0.1).to_array()[0] == 0.10000000149011612


def test_overflow_becomes_infinity():
    assert F32x8.splat(1e39).to_array()[0] == math.inf


def test_wrong_lane_count():
    with pytest.raises(ValueError):
        F32x8([1.0, 2.0])
    with pytest.raises(ValueError):
        F32x4([1.0] * 5)


def test_bits_round_trip():
    vec = F32x8.from_array([1.0, -2.5, 0.0, -0.0, 3.25, 100.0, -7.0, 0.5])
    bits = vec.to_bits()
    assert bits.to_array()[0] == 0x3F80_0000
    assert bits.to_array()[3] == 0x8000_0000
    assert F32x8.from_bits(bits).to_array() == vec.to_array()


def test_f32x4_bits_round_trip():
    vec = F32x4([1.0, 2.0, -1.0, 0.0])
    assert vec.to_bits() == U32x4([0x3F80_0000, 0x4000_0000, 0xBF80_0000, 0])
    assert F32x4.from_bits(vec.to_bits()).to_array() == [1.0, 2.0, -1.0, 0.0]


def test_f32x4_set():
    vec = F32x4.splat(0.0).set(2, 5.0)
    assert vec.to_array() == [0.0, 0.0, 5.0, 0.0]
    with pytest.raises(IndexError):
        vec.set(4, 1.0)


def test_f32x4_le_and_select():
    a = F32x4([1.0, 2.0, 3.0, math.nan])
    b = F32x4([2.0, 2.0, 1.0, 0.0])
    mask = a.le(b)
    assert mask == M32x4([U32_MAX, U32_MAX, 0, 0])
    assert a.select(b, mask).to_array() == [1.0, 2.0, 1.0, 0.0]


def test_f32x4_clamp_sqrt_mul_add():
    vec = F32x4([-1.0, 0.5, 2.0, 9.0])
    clamped = vec.clamp(F32x4.splat(0.0), F32x4.splat(1.0))
    assert clamped.to_array() == [0.0, 0.5, 1.0, 1.0]
    assert F32x4([4.0, 9.0, 0.0, 16.0]).sqrt().to_array() == [2.0, 3.0, 0.0, 4.0]
    result = F32x4.splat(2.0).mul_add(F32x4.splat(3.0), F32x4.splat(1.0))
    assert result.to_array() == [7.0] * 4


def test_f32x4_add_mul():
    a = F32x4([1.0, 2.0, 3.0, 4.0])
    b = F32x4([0.5, 0.5, 2.0, -1.0])
    assert (a + b).to_array() == [1.5, 2.5, 5.0, 3.0]
    assert (a * b).to_array() == [0.5, 1.0, 6.0, -4.0]


def test_clamp_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        F32x8.splat(1.0).clamp(F32x8.splat(2.0), F32x8.splat(1.0))


def test_f32x8_comparisons():
    a = F32x8.from_array([1.0, 2.0, 3.0, math.nan, 0.0, -1.0, 5.0, 5.0])
    b = F32x8.from_array([1.0, 3.0, 2.0, math.nan, -0.0, 1.0, 5.0, 6.0])
    assert a.eq(b) == M32x8.from_bools([True, False, False, False, True, False, True, False])
    assert a.lt(b) == M32x8.from_bools([False, True, False, False, False, True, False, True])
    assert a.le(b) == M32x8.from_bools([True, True, False, False, True, True, True, True])


def test_f32x8_select():
    a = F32x8.splat(1.0)
    b = F32x8.splat(2.0)
    mask = M32x8.from_bools([True, False] * 4)
    assert a.select(b, mask).to_array() == [1.0, 2.0] * 4


def test_f32x8_abs_min_max_clamp():
    a = F32x8.from_array([-1.0, 2.0, -3.0, 4.0, math.nan, 0.0, 7.0, -8.0])
    b = F32x8.splat(0.0)
    assert a.abs().to_array()[:4] == [1.0, 2.0, 3.0, 4.0]
    assert a.min(b).to_array()[:5] == [-1.0, 0.0, -3.0, 0.0, 0.0]
    assert a.max(b).to_array()[:5] == [0.0, 2.0, 0.0, 4.0, 0.0]
    clamped = a.clamp(F32x8.splat(-2.0), F32x8.splat(2.0)).to_array()
    assert clamped[:4] == [-1.0, 2.0, -2.0, 2.0]


def test_f32x8_sqrt_recip():
    vec = F32x8.from_array([4.0, 1.0, 0.25, -1.0, 0.0, 16.0, 2.0, 100.0])
    roots = vec.sqrt().to_array()
    assert roots[:3] == [2.0, 1.0, 0.5]
    assert math.isnan(roots[3])
    recips = vec.recip().to_array()
    assert recips[:4] == [0.25, 1.0, 4.0, -1.0]
    assert recips[4] == math.inf


def test_f32x8_arithmetic():
    a = F32x8.from_array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0])
    b = F32x8.splat(2.0)
    assert (a + b).to_array() == [3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]
    assert (a - b).to_array() == [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert (a * b).to_array() == [2.0, 4.0, 6.0, 8.0, 10.0, 12.0, 14.0, 16.0]
    assert (a / b).to_array() == [0.5, 1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0]
    assert (-a).to_array() == [-1.0, -2.0, -3.0, -4.0, -5.0, -6.0, -7.0, -8.0]
    assert a.mul_add(b, F32x8.splat(1.0)).to_array()[0] == 3.0


def test_f32x8_divide_by_zero():
    result = (F32x8.splat(1.0) / F32x8.splat(0.0)).to_array()
    assert result == [math.inf] * 8
    assert math.isnan((F32x8.splat(0.0) / F32x8.splat(0.0)).to_array()[0])


def test_f32x8_or_sets_sign():
    assert (F32x8.splat(1.0) | F32x8.splat(-0.0)).to_array() == [-1.0] * 8


def test_from_i32x8():
    ints = I32x8([0, 1, -1, 16777217, 100, -100, 7, 2147483647])
    values = F32x8.from_i32x8(ints).to_array()
    assert values[:3] == [0.0, 1.0, -1.0]
    assert values[3] == 16777216.0
    assert values[7] == 2147483648.0


def test_u8x8_from_f32x8():
    vec = F32x8.from_array([2.5, 0.4, -1.0, 300.0, math.nan, 254.6, 1.5, 0.5])
    assert U8x8.from_f32x8(vec).to_array() == [3, 0, 0, 255, 0, 255, 2, 1]


def test_operand_type_checked():
    with pytest.raises(TypeError):
        F32x8.splat(1.0).eq(F32x4.splat(1.0))
    with pytest.raises(TypeError):
        F32x8.splat(1.0) + F32x4.splat(1.0)