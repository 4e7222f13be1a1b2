"""
Kubelka-Munk Theory Implementation for Pigment Color Mixing

Based on the Mixbox paper by Sochorová & Jamriška (2021).
Renders a mixture of colorants to linear sRGB through K/S mixing,
reflectance, Saunderson correction and CIE XYZ integration.
"""

import numpy as np
from typing import Sequence, Tuple
from dataclasses import dataclass


# CIE 1931 2-degree standard observer data (sampled at 10nm from 380-750nm)
CIE_WAVELENGTHS = np.arange(380, 751, 10)  # 38 wavelengths

CIE_X_BAR = np.array([
    0.0014, 0.0042, 0.0143, 0.0435, 0.1344, 0.2839, 0.3483, 0.3362, 0.2908, 0.1954,
    0.0956, 0.0320, 0.0049, 0.0093, 0.0633, 0.1655, 0.2904, 0.4334, 0.5945, 0.7621,
    0.9163, 1.0263, 1.0622, 1.0026, 0.8544, 0.6424, 0.4479, 0.2835, 0.1649, 0.0874,
    0.0468, 0.0227, 0.0114, 0.0058, 0.0029, 0.0014, 0.0007, 0.0003
])

CIE_Y_BAR = np.array([
    0.0000, 0.0001, 0.0004, 0.0012, 0.0040, 0.0116, 0.0230, 0.0380, 0.0600, 0.0910,
    0.1390, 0.2080, 0.3230, 0.5030, 0.7100, 0.8620, 0.9540, 0.9950, 0.9950, 0.9520,
    0.8700, 0.7570, 0.6310, 0.5030, 0.3810, 0.2650, 0.1750, 0.1070, 0.0610, 0.0320,
    0.0170, 0.0082, 0.0041, 0.0021, 0.0010, 0.0005, 0.0003, 0.0001
])

CIE_Z_BAR = np.array([
    0.0065, 0.0201, 0.0679, 0.2074, 0.6456, 1.3856, 1.7471, 1.7721, 1.6692, 1.2876,
    0.8130, 0.4652, 0.2720, 0.1582, 0.0782, 0.0422, 0.0203, 0.0087, 0.0039, 0.0021,
    0.0017, 0.0011, 0.0008, 0.0003, 0.0002, 0.0000, 0.0000, 0.0000, 0.0000, 0.0000,
    0.0000, 0.0000, 0.0000, 0.0000, 0.0000, 0.0000, 0.0000, 0.0000
])

# D65 illuminant relative spectral power (10nm sampling, 560nm = 100)
D65_ILLUMINANT = np.array([
    49.9755, 54.6482, 82.7549, 91.4860, 93.4318, 86.6823, 104.865, 117.008, 117.812, 114.861,
    115.923, 108.811, 109.354, 107.802, 104.790, 107.689, 104.405, 104.046, 100.000, 96.3342,
    95.7880, 88.6856, 90.0062, 89.5991, 87.6987, 83.2886, 83.6992, 80.0268, 80.2146, 82.2778,
    78.2842, 69.7213, 71.6091, 74.3490, 61.6040, 69.8856, 75.0870, 63.5927
])

XYZ_TO_LINEAR_SRGB = np.array([
    [ 3.2406, -1.5372, -0.4986],
    [-0.9689,  1.8758,  0.0415],
    [ 0.0557, -0.2040,  1.0570],
])


@dataclass(frozen=True, eq=False)
class Colorant:
    """A base colorant with its K (absorption) and S (scattering) spectra."""

    name: str
    K: np.ndarray  # Absorption coefficient per wavelength (38 values)
    S: np.ndarray  # Scattering coefficient per wavelength (38 values)

    def __post_init__(self):
        if len(self.K) != len(CIE_WAVELENGTHS):
            raise ValueError(f"K spectrum must have {len(CIE_WAVELENGTHS)} samples")
        if len(self.S) != len(CIE_WAVELENGTHS):
            raise ValueError(f"S spectrum must have {len(CIE_WAVELENGTHS)} samples")
        if not np.all(self.K >= 0):
            raise ValueError("K values must be non-negative")
        if not np.all(self.S > 0):
            raise ValueError("S values must be positive")


class KubelkaMunk:
    """
    Kubelka-Munk pigment mixing model.

    Takes colorant K/S coefficients and computes the linear sRGB color of
    their mixture. Instances hold only immutable configuration and are safe
    to share between threads.
    """

    def __init__(self, k1: float = 0.04, k2: float = 0.6):
        """
        Args:
            k1, k2: Saunderson correction coefficients for surface reflection.
        """
        self.k1 = k1
        self.k2 = k2
        self.Y_D65 = np.trapezoid(CIE_Y_BAR * D65_ILLUMINANT, CIE_WAVELENGTHS)

    def mix_spectra(
        self, colorants: Sequence[Colorant], concentrations: np.ndarray
    ) -> Tuple[np.ndarray, np.ndarray] | None:
        """
        Mix colorant spectra according to K-M theory (Equation 1 from paper).

        Negative concentrations are clipped and the rest renormalized to sum
        to 1. An all-zero mixture has no pigment at all and yields ``None``.
        """
        concentrations = np.clip(np.asarray(concentrations, dtype=np.float64), 0, None)
        if len(concentrations) != len(colorants):
            raise ValueError("Concentration count must match colorant count")

        total = np.sum(concentrations)
        if total <= 0:
            return None
        concentrations = concentrations / total

        K_mix = np.zeros(len(CIE_WAVELENGTHS))
        S_mix = np.zeros(len(CIE_WAVELENGTHS))
        for colorant, c in zip(colorants, concentrations):
            K_mix += c * colorant.K
            S_mix += c * colorant.S

        return K_mix, S_mix

    def compute_reflectance(self, K: np.ndarray, S: np.ndarray) -> np.ndarray:
        """
        Compute reflectance spectrum from K and S using K-M equation (Equation 2).

        Assumes infinite thickness (completely hides substrate).
        """
        S = np.where(S == 0, 1e-10, S)

        a = K / S
        b = np.sqrt(a * a + 2 * a)
        R = 1 + a - b

        return np.clip(R, 0, 1)

    def apply_saunderson_correction(self, R: np.ndarray) -> np.ndarray:
        """Apply Saunderson correction for surface reflection (Equation 6)."""
        numerator = (1 - self.k1) * (1 - self.k2) * R
        denominator = 1 - self.k2 * R
        denominator = np.where(denominator == 0, 1e-10, denominator)

        return np.clip(numerator / denominator, 0, 1)

    def reflectance_to_xyz(self, R: np.ndarray) -> np.ndarray:
        """Convert reflectance spectrum to CIE XYZ tristimulus values (Equations 3-5)."""
        weighted_R = R * D65_ILLUMINANT

        xyz = np.array([
            np.trapezoid(CIE_X_BAR * weighted_R, CIE_WAVELENGTHS),
            np.trapezoid(CIE_Y_BAR * weighted_R, CIE_WAVELENGTHS),
            np.trapezoid(CIE_Z_BAR * weighted_R, CIE_WAVELENGTHS),
        ])
        return xyz / self.Y_D65

    def xyz_to_linear_srgb(self, xyz: np.ndarray) -> np.ndarray:
        """Convert XYZ to linear sRGB (Equation 7)."""
        return XYZ_TO_LINEAR_SRGB @ xyz

    def mix_to_linear(
        self, colorants: Sequence[Colorant], concentrations: np.ndarray
    ) -> np.ndarray:
        """
        Complete pipeline: mix colorants and get a linear sRGB color.

        This is the ``mix()`` function from the paper (Equations 1-7),
        stopping before gamma encoding. The result is clipped to [0, 1].
        """
        spectra = self.mix_spectra(colorants, concentrations)
        if spectra is None:
            return np.zeros(3)

        R_spectrum = self.compute_reflectance(*spectra)
        R_corrected = self.apply_saunderson_correction(R_spectrum)
        rgb_linear = self.xyz_to_linear_srgb(self.reflectance_to_xyz(R_corrected))
        return np.clip(rgb_linear, 0, 1)
