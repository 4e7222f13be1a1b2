"""Tests for the sRGB transfer functions and channel quantization."""

import numpy as np
import pytest

from pigment_mixing import decode, encode, u8_to_unit, unit_to_u8, u16_to_unit, unit_to_u16


def test_decode_known_values():
    """Endpoints and a mid gray follow the IEC piecewise curve."""
    assert decode(0.0) == 0.0
    assert decode(1.0) == pytest.approx(1.0)
    assert decode(0.5) == pytest.approx(0.21404, abs=1e-5)
    # Linear toe
    assert decode(0.04) == pytest.approx(0.04 / 12.92)


def test_encode_inverts_decode():
    """encode(decode(x)) returns x across the unit range."""
    values = np.linspace(0.0, 1.0, 101)
    np.testing.assert_allclose(encode(decode(values)), values, atol=1e-12)


def test_out_of_range_is_clamped():
    """Inputs outside [0, 1] are clamped rather than producing NaN."""
    assert decode(-0.5) == 0.0
    assert decode(1.5) == pytest.approx(1.0)
    assert encode(-0.1) == 0.0
    assert encode(2.0) == pytest.approx(1.0)
    assert not np.any(np.isnan(encode(np.array([-1.0, 0.3, 4.0]))))


def test_scalars_stay_scalars():
    """Scalar input gives a scalar, array input gives an array."""
    assert np.ndim(decode(0.3)) == 0
    assert decode((0.1, 0.2, 0.3)).shape == (3,)


def test_u8_quantization():
    """u8 <-> unit conversion divides by 255 and rounds to nearest on the way back."""
    assert u8_to_unit(255) == 1.0
    assert u8_to_unit(51) == pytest.approx(0.2)
    assert unit_to_u8(0.5) == 128
    assert unit_to_u8(0.499 / 255) == 0
    assert unit_to_u8(1.2) == 255
    assert unit_to_u8(-0.3) == 0
    assert isinstance(unit_to_u8(0.5), int)


def test_u8_roundtrip_is_exact():
    """Every byte survives unit_to_u8(u8_to_unit(b))."""
    bytes_ = np.arange(256)
    np.testing.assert_array_equal(unit_to_u8(u8_to_unit(bytes_)), bytes_)


def test_u16_quantization():
    """u16 conversions use 65535 as full scale."""
    assert u16_to_unit(65535) == 1.0
    assert unit_to_u16(1.0) == 65535
    assert unit_to_u16(0.5) == 32768
    assert unit_to_u16(3.0) == 65535
