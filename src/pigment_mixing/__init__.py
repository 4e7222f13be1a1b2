"""
pigment_mixing — pigment-like color mixing.

Uses Kubelka-Munk theory so that mixing blue + yellow yields green
instead of the muddy gray you get with naive RGB interpolation.

Quick start::

    from pigment_mixing import mix_srgb_u8, Pigment

    pale_green = mix_srgb_u8((252, 211, 0), (0, 0, 96), 0.5)

    w = 1.0 / 3.0
    result = (w * Pigment.from_srgb_u8(252, 211, 0)
              + w * Pigment.from_srgb_u8(201, 37, 44)
              + w * Pigment.from_srgb_u8(0, 0, 96))
    linear_rgb = result.to_linear()
"""

from .codec import (
    decode,
    encode,
    u8_to_unit,
    u16_to_unit,
    unit_to_u8,
    unit_to_u16,
)
from .km_core import (
    CIE_WAVELENGTHS,
    CIE_X_BAR,
    CIE_Y_BAR,
    CIE_Z_BAR,
    D65_ILLUMINANT,
    Colorant,
    KubelkaMunk,
)
from .colorants import (
    CMYK_PALETTE,
    CMYW_PALETTE,
    RYBW_PALETTE,
    absorbs_above,
    absorbs_below,
    gaussian_peak,
)
from .errors import InvalidArgumentError
from .unmixer import LinearRGBUnmixer
from .transform import (
    LATENT_SIZE,
    KubelkaMunkTransform,
    PigmentTransform,
    default_transform,
)
from .pigment import Pigment, combine, scale, weighted_sum
from .quantize import quantize_triplet
from .api import (
    Encoding,
    mix,
    mix_linear_srgb,
    mix_linear_srgb_u16,
    mix_linear_srgb_u16_dither,
    mix_pigment,
    mix_srgb_f32,
    mix_srgb_u8,
    mix_srgb_u8_dither,
)

__all__ = [
    # Codec
    "decode",
    "encode",
    "u8_to_unit",
    "u16_to_unit",
    "unit_to_u8",
    "unit_to_u16",
    # Kubelka-Munk core
    "KubelkaMunk",
    "Colorant",
    "CIE_WAVELENGTHS",
    "CIE_X_BAR",
    "CIE_Y_BAR",
    "CIE_Z_BAR",
    "D65_ILLUMINANT",
    "gaussian_peak",
    "absorbs_above",
    "absorbs_below",
    "CMYK_PALETTE",
    "CMYW_PALETTE",
    "RYBW_PALETTE",
    "LinearRGBUnmixer",
    # Transform
    "PigmentTransform",
    "KubelkaMunkTransform",
    "default_transform",
    "LATENT_SIZE",
    # Pigment algebra
    "Pigment",
    "scale",
    "combine",
    "weighted_sum",
    # Mixing API
    "Encoding",
    "mix",
    "mix_pigment",
    "mix_srgb_u8",
    "mix_srgb_u8_dither",
    "mix_srgb_f32",
    "mix_linear_srgb",
    "mix_linear_srgb_u16",
    "mix_linear_srgb_u16_dither",
    "quantize_triplet",
    # Errors
    "InvalidArgumentError",
]
