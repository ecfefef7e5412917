"""Fast approximations of square root, inverse square root, sine and cosine.

The computations follow single-precision float arithmetic, so results
match what a 32-bit float implementation produces.
"""

from __future__ import annotations

import math
import struct

_SIN90 = (
    0x0000, 0x0647, 0x0C8B, 0x12C7, 0x18F8, 0x1F19, 0x2527, 0x2B1E,
    0x30FB, 0x36B9, 0x3C56, 0x41CD, 0x471C, 0x4C3F, 0x5133, 0x55F4,
    0x5A81, 0x5ED6, 0x62F1, 0x66CE, 0x6A6C, 0x6DC9, 0x70E1, 0x73B5,
    0x7640, 0x7883, 0x7A7C, 0x7C29, 0x7D89, 0x7E9C, 0x7F61, 0x7FD7,
    0x7FFF,
)

_TABLE_BITS = 5
_TABLE_MASK = (1 << _TABLE_BITS) - 1
_LOOKUP_BITS = _TABLE_BITS + 2
_FLIP_BIT = 1 << _TABLE_BITS
_NEGATE_BIT = 1 << (_TABLE_BITS + 1)
_INTERP_BITS = 16 - 1 - _LOOKUP_BITS
_INTERP_MASK = (1 << _INTERP_BITS) - 1


def _f32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _float_bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _bits_float(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits & 0xFFFFFFFF))[0]


def _int16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


_FLOAT_TO_Q15 = _f32(5215.189175235226362)  # 32768 / (2 * pi)
_Q15_TO_FLOAT = _f32(3.051850947599719e-5)  # 1 / 32767
_HALF_PI = _f32(1.570796326794897)


def constrain(value, low, high):
    """Clamp ``value`` into the closed range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def fast_sqrt(value: float) -> float:
    """Approximate square root; NaN for negative input."""
    value = _f32(value)
    if value < 0:
        return math.nan
    bits = _float_bits(value)
    signed = bits - (1 << 32) if bits & 0x80000000 else bits
    estimate = _bits_float((1 << 29) + (signed >> 1) - (1 << 22))
    estimate = _f32(estimate + _f32(value / estimate))
    return _f32(_f32(0.25 * estimate) + _f32(value / estimate))


def fast_inv_sqrt(value: float) -> float:
    """Approximate 1/sqrt(value); NaN for negative input."""
    value = _f32(value)
    if value < 0:
        return math.nan
    estimate = _bits_float(0x5F3759DF - (_float_bits(value) >> 1))
    correction = _f32(1.5 - _f32(_f32(_f32(value * 0.5) * estimate) * estimate))
    return _f32(estimate * correction)


def fast_sin(angle: float) -> float:
    """Table-based sine of ``angle`` in radians."""
    scaled = _f32(_f32(angle) * _FLOAT_TO_Q15)
    if not math.isfinite(scaled):
        raise ValueError("angle must be finite")
    angle_int = _int16(int(scaled))
    if angle_int < 0:
        angle_int += 0x8000
    segment = angle_int >> _INTERP_BITS
    if segment & _FLIP_BIT:
        index = ~segment
        fraction = ~angle_int
    else:
        index = segment
        fraction = angle_int
    index &= _TABLE_MASK
    delta = (_SIN90[index + 1] - _SIN90[index]) * (fraction & _INTERP_MASK)
    result = _int16(_SIN90[index] + _int16(delta >> _INTERP_BITS))
    if segment & _NEGATE_BIT:
        result = -result
    return _f32(result * _Q15_TO_FLOAT)


def fast_cos(angle: float) -> float:
    """Table-based cosine of ``angle`` in radians."""
    return fast_sin(_f32(_f32(angle) + _HALF_PI))