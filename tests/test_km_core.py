"""Tests for the Kubelka-Munk model, colorants and unmixer."""

import numpy as np
import pytest


def test_pure_colorant_colors():
    """Each pure colorant produces a valid linear RGB color."""
    from pigment_mixing import KubelkaMunk, CMYW_PALETTE

    km = KubelkaMunk()
    for i, colorant in enumerate(CMYW_PALETTE):
        conc = np.zeros(4)
        conc[i] = 1.0
        rgb = km.mix_to_linear(CMYW_PALETTE, conc)

        assert rgb.shape == (3,)
        assert np.all((rgb >= 0) & (rgb <= 1)), f"{colorant.name} produced invalid RGB: {rgb}"


def test_white_is_brighter_than_cyan():
    """White reflects more than cyan in the red channel."""
    from pigment_mixing import KubelkaMunk, CMYW_PALETTE

    km = KubelkaMunk()
    cyan = km.mix_to_linear(CMYW_PALETTE, [1, 0, 0, 0])
    white = km.mix_to_linear(CMYW_PALETTE, [0, 0, 0, 1])
    assert white[0] > cyan[0]


def test_zero_concentrations_are_black():
    """A mixture with no colorant at all renders as black."""
    from pigment_mixing import KubelkaMunk, CMYW_PALETTE

    km = KubelkaMunk()
    assert np.array_equal(km.mix_to_linear(CMYW_PALETTE, np.zeros(4)), np.zeros(3))


def test_concentrations_are_renormalized():
    """Scaling all concentrations does not change the mixed color."""
    from pigment_mixing import KubelkaMunk, CMYW_PALETTE

    km = KubelkaMunk()
    conc = np.array([0.1, 0.2, 0.3, 0.4])
    np.testing.assert_allclose(
        km.mix_to_linear(CMYW_PALETTE, conc),
        km.mix_to_linear(CMYW_PALETTE, 2.5 * conc),
    )


def test_palettes_exist():
    """All built-in palettes should have 4 colorants each."""
    from pigment_mixing import CMYW_PALETTE, CMYK_PALETTE, RYBW_PALETTE

    for palette in [CMYW_PALETTE, CMYK_PALETTE, RYBW_PALETTE]:
        assert len(palette) == 4
        for colorant in palette:
            assert len(colorant.K) == 38
            assert len(colorant.S) == 38


def test_colorant_validation():
    """Colorant should reject invalid K/S spectra."""
    from pigment_mixing import Colorant

    with pytest.raises(ValueError):
        Colorant("Bad", np.ones(10), np.ones(38))  # Wrong K length

    with pytest.raises(ValueError):
        Colorant("Bad", np.ones(38) * -1, np.ones(38))  # Negative K

    with pytest.raises(ValueError):
        Colorant("Bad", np.ones(38), np.zeros(38))  # Zero S


def test_concentrations_sum_to_one():
    """Unmixing always produces concentrations that sum to 1."""
    from pigment_mixing import LinearRGBUnmixer, CMYW_PALETTE, decode

    unmixer = LinearRGBUnmixer(CMYW_PALETTE)
    ratios = unmixer.unmix(decode(np.array([128, 200, 80]) / 255))

    assert ratios.shape == (4,)
    assert np.allclose(np.sum(ratios), 1.0, atol=1e-6)
    assert np.all(ratios >= 0)


def test_residual_closes_the_gap():
    """Mixed color plus residual reproduces the requested linear color."""
    from pigment_mixing import LinearRGBUnmixer, KubelkaMunk, CMYW_PALETTE

    km = KubelkaMunk()
    unmixer = LinearRGBUnmixer(CMYW_PALETTE, km)
    target = np.array([0.6, 0.1, 0.05])
    conc, residual = unmixer.unmix_with_residual(target)

    np.testing.assert_allclose(km.mix_to_linear(CMYW_PALETTE, conc) + residual, target)


def test_transform_requires_four_colorants():
    """The Kubelka-Munk transform only accepts four-colorant palettes."""
    from pigment_mixing import KubelkaMunkTransform, CMYW_PALETTE, InvalidArgumentError

    with pytest.raises(InvalidArgumentError):
        KubelkaMunkTransform(CMYW_PALETTE[:3])


def test_transform_rejects_wrong_latent_size():
    """Decoding a latent vector of the wrong size is a caller error."""
    from pigment_mixing import default_transform, InvalidArgumentError

    with pytest.raises(InvalidArgumentError):
        default_transform().to_rgb(np.zeros(5))


def test_transform_latent_layout():
    """Latent is 4 concentrations followed by a 3-channel residual."""
    from pigment_mixing import default_transform, LATENT_SIZE

    transform = default_transform()
    latent = transform.to_latent((0.2, 0.4, 0.1))

    assert latent.shape == (LATENT_SIZE,)
    assert np.sum(latent[0:4]) == pytest.approx(1.0)
    np.testing.assert_allclose(transform.to_rgb(latent), (0.2, 0.4, 0.1), atol=1e-12)
    np.testing.assert_allclose(transform.concentrations((0.2, 0.4, 0.1)), latent[0:4])


def test_default_transform_is_shared():
    """default_transform() hands out one shared instance."""
    from pigment_mixing import default_transform

    assert default_transform() is default_transform()


def test_perfect_reflector_is_neutral_white():
    """A non-absorbing colorant without surface loss renders as D65 white."""
    from pigment_mixing import KubelkaMunk, Colorant, CIE_WAVELENGTHS

    km = KubelkaMunk(k1=0.0, k2=0.0)
    reflector = Colorant("Reflector", np.zeros(len(CIE_WAVELENGTHS)), np.ones(len(CIE_WAVELENGTHS)))

    np.testing.assert_allclose(km.mix_to_linear([reflector], [1.0]), (1.0, 1.0, 1.0), atol=0.01)


def test_saturated_yellow_is_mostly_yellow():
    """Bright yellow unmixes to the yellow colorant, not white plus residual."""
    from pigment_mixing import LinearRGBUnmixer, CMYW_PALETTE, decode

    unmixer = LinearRGBUnmixer(CMYW_PALETTE)
    conc, residual = unmixer.unmix_with_residual(decode(np.array([252, 211, 0]) / 255))

    assert conc[2] > 0.8, conc
    assert np.max(np.abs(residual)) < 0.15, residual


def test_simplex_grid_covers_simplex():
    """Grid nodes are non-negative, sum to one, and include every vertex."""
    from pigment_mixing.unmixer import simplex_grid

    grid = simplex_grid(4, 10)

    assert grid.shape == (286, 4)
    assert np.all(grid >= 0)
    np.testing.assert_allclose(grid.sum(axis=1), 1.0)
    for vertex in np.eye(4):
        assert np.any(np.all(grid == vertex, axis=1))
