"""
sRGB transfer functions and channel quantization.

All functions work on Python scalars as well as numpy arrays and are
applied per channel. Inputs are clamped to [0, 1] before the transfer
function so out-of-gamut intermediates never hit a fractional power of a
negative base.
"""

import numpy as np


U8_MAX = 255
U16_MAX = 65535


def decode(encoded):
    """Encoded sRGB [0, 1] -> linear light (IEC 61966-2-1)."""
    v = np.clip(np.asarray(encoded, dtype=np.float64), 0.0, 1.0)
    linear = np.where(v <= 0.04045, v / 12.92, ((v + 0.055) / 1.055) ** 2.4)
    return linear[()] if linear.ndim == 0 else linear


def encode(linear):
    """Linear light -> encoded sRGB [0, 1]. Inverse of :func:`decode`."""
    v = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    encoded = np.where(v <= 0.0031308, 12.92 * v, 1.055 * v ** (1 / 2.4) - 0.055)
    return encoded[()] if encoded.ndim == 0 else encoded


def _to_unit(value, maximum: int):
    unit = np.asarray(value, dtype=np.float64) / maximum
    return unit[()] if unit.ndim == 0 else unit


def _from_unit(value, maximum: int):
    scaled = np.clip(np.rint(np.asarray(value, dtype=np.float64) * maximum), 0, maximum)
    if scaled.ndim == 0:
        return int(scaled)
    return scaled.astype(np.int64)


def u8_to_unit(value):
    """Convert uint8 [0, 255] to float [0, 1]."""
    return _to_unit(value, U8_MAX)


def unit_to_u8(value):
    """Convert float [0, 1] to uint8 [0, 255], rounding to nearest."""
    return _from_unit(value, U8_MAX)


def u16_to_unit(value):
    """Convert uint16 [0, 65535] to float [0, 1]."""
    return _to_unit(value, U16_MAX)


def unit_to_u16(value):
    """Convert float [0, 1] to uint16 [0, 65535], rounding to nearest."""
    return _from_unit(value, U16_MAX)
