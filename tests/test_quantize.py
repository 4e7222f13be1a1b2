"""Tests for dithered quantization."""

import numpy as np


def test_offset_range():
    """Offsets are drawn from [-0.5, 0.5]."""
    from pigment_mixing.quantize import generate_offset

    rng = np.random.default_rng(0)
    offsets = [generate_offset(rng) for _ in range(1000)]
    assert min(offsets) >= -0.5
    assert max(offsets) <= 0.5


def test_quantize_triplet_clamps():
    """Results never leave the [lo, hi] range."""
    from pigment_mixing import quantize_triplet

    rng = np.random.default_rng(1)
    for _ in range(50):
        r, g, b = quantize_triplet((1.2, -0.1, 0.5), 255, 0, 255, rng)
        assert r == 255
        assert g == 0
        assert b in (127, 128)


def test_quantize_triplet_shares_offset():
    """Equal channels always quantize to equal values."""
    from pigment_mixing import quantize_triplet

    rng = np.random.default_rng(2)
    for _ in range(50):
        r, g, b = quantize_triplet((0.3, 0.3, 0.3), 65535, 0, 65535, rng)
        assert r == g == b


def test_dither_averages_out():
    """The mean of many dithered samples approaches the exact value."""
    from pigment_mixing import quantize_triplet

    rng = np.random.default_rng(3)
    value = 100.3 / 255
    samples = [quantize_triplet((value, value, value), 255, 0, 255, rng)[0] for _ in range(4000)]
    assert abs(np.mean(samples) - 100.3) < 0.05
