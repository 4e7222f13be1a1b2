"""
Colorant Library

Synthetic K/S spectral curves for the base colorants the Kubelka-Munk
transform decomposes colors into.

Real pigments have absorption bands with steep edges rather than bell
shapes, so most curves here are built from logistic edges. The CMYW set
is fitted so that strongly saturated colors are reached by the
concentrations themselves and the residual stays small; otherwise the
linear residual dominates a mix and it degrades to an RGB average.
"""

import numpy as np

from .km_core import Colorant, CIE_WAVELENGTHS

# Background absorption shared by the chromatic colorants
BASE_ABSORPTION = 0.002


def gaussian_peak(wavelengths, center, width, height):
    """Create a Gaussian-shaped absorption band."""
    return height * np.exp(-((wavelengths - center) / width) ** 2)


def absorbs_below(wavelengths, edge, softness, height):
    """Absorption that rises to ``height`` below ``edge`` nm."""
    return height / (1 + np.exp((wavelengths - edge) / softness))


def absorbs_above(wavelengths, edge, softness, height):
    """Absorption that rises to ``height`` above ``edge`` nm."""
    return height / (1 + np.exp((edge - wavelengths) / softness))


def _flat(value):
    return np.ones(len(CIE_WAVELENGTHS)) * value


def create_cyan() -> Colorant:
    """Cyan (approximates Phthalo Blue behavior).

    Absorbs orange and red beyond ~595nm; transmits blue and green.
    """
    K = _flat(BASE_ABSORPTION) + absorbs_above(CIE_WAVELENGTHS, 595, 15, 6.0)
    return Colorant("Cyan", K, _flat(0.3))


def create_magenta() -> Colorant:
    """Magenta (approximates Quinacridone Magenta): a broad green band."""
    K = _flat(BASE_ABSORPTION) + gaussian_peak(CIE_WAVELENGTHS, 545, 35, 1.5)
    return Colorant("Magenta", K, _flat(0.3))


def create_yellow() -> Colorant:
    """Yellow (approximates Hansa Yellow).

    Sharp cutoff below ~490nm and strong scattering, so a little yellow
    stays bright in a mixture.
    """
    K = _flat(BASE_ABSORPTION) + absorbs_below(CIE_WAVELENGTHS, 490, 12, 4.0)
    return Colorant("Yellow", K, _flat(2.5))


def create_black() -> Colorant:
    """Black - absorbs everything uniformly."""
    return Colorant("Black", _flat(4.0), _flat(0.2))


def create_white() -> Colorant:
    """White (Titanium White equivalent): low absorption, moderate scattering."""
    return Colorant("White", _flat(0.008), _flat(1.2))


def create_red() -> Colorant:
    """Red (approximates Pyrrole Red): absorbs everything below ~585nm."""
    K = _flat(BASE_ABSORPTION) + absorbs_below(CIE_WAVELENGTHS, 585, 12, 5.0)
    return Colorant("Red", K, _flat(0.8))


def create_blue() -> Colorant:
    """Blue (approximates Ultramarine): absorbs everything above ~510nm."""
    K = _flat(BASE_ABSORPTION) + absorbs_above(CIE_WAVELENGTHS, 510, 15, 5.0)
    return Colorant("Blue", K, _flat(0.4))


# ---------------------------------------------------------------------------
# Predefined palettes
# ---------------------------------------------------------------------------

CMYW_PALETTE = (create_cyan(), create_magenta(), create_yellow(), create_white())

CMYK_PALETTE = (create_cyan(), create_magenta(), create_yellow(), create_black())

RYBW_PALETTE = (create_red(), create_yellow(), create_blue(), create_white())
