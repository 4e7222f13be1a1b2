"""
Mixing API

One generic :func:`mix` entry point parameterized by the channel
:class:`Encoding`, and the two-color conveniences built on it::

    mix(colors, weights, encoding) -> color
    mix_srgb_u8(a, b, t)  -> (r, g, b)
    mix_srgb_f32(a, b, t) -> (r, g, b)

Encoded colors are linearized before entering the pigment transform and
encoded again on the way out.
"""

import enum
from typing import Sequence, Tuple

import numpy as np

from .codec import (
    U8_MAX,
    U16_MAX,
    decode,
    encode,
    u8_to_unit,
    u16_to_unit,
    unit_to_u8,
    unit_to_u16,
)
from .errors import InvalidArgumentError
from .pigment import Pigment, weighted_sum
from .quantize import quantize_triplet
from .transform import PigmentTransform, default_transform


class Encoding(enum.Enum):
    """How the channels of a color passed to :func:`mix` are stored."""

    U8 = "u8"                   # encoded sRGB, 0-255
    U16 = "u16"                 # encoded sRGB, 0-65535
    F32 = "f32"                 # encoded sRGB, 0.0-1.0
    LINEAR = "linear"           # linear sRGB, 0.0-1.0
    LINEAR_U16 = "linear_u16"   # linear sRGB, 0-65535

    @property
    def is_linear(self) -> bool:
        return self in (Encoding.LINEAR, Encoding.LINEAR_U16)

    @property
    def integer_max(self) -> int | None:
        """Value representing 1.0 for integer encodings, else ``None``."""
        if self is Encoding.U8:
            return U8_MAX
        if self in (Encoding.U16, Encoding.LINEAR_U16):
            return U16_MAX
        return None


def _check_triple(color) -> np.ndarray:
    channels = np.asarray(color, dtype=np.float64)
    if channels.shape != (3,):
        raise InvalidArgumentError(
            f"Colors must have exactly 3 channels, got {color!r}"
        )
    return channels


def to_linear(color: Sequence[float], encoding: Encoding) -> np.ndarray:
    """Bring one color of the given encoding into linear light."""
    channels = _check_triple(color)
    if encoding is Encoding.U8:
        channels = u8_to_unit(channels)
    elif encoding in (Encoding.U16, Encoding.LINEAR_U16):
        channels = u16_to_unit(channels)
    if encoding.is_linear:
        return channels
    return decode(channels)


def from_linear(
    linear_rgb: np.ndarray,
    encoding: Encoding,
    rng: np.random.Generator | None = None,
) -> Tuple:
    """
    Express a linear color in the given encoding.

    Integer encodings round to nearest, or dither when ``rng`` is given.
    Float encodings are clamped to [0, 1].
    """
    unit = np.clip(linear_rgb, 0.0, 1.0) if encoding.is_linear else encode(linear_rgb)

    one = encoding.integer_max
    if one is None:
        return tuple(float(c) for c in unit)
    if rng is not None:
        return quantize_triplet(unit, one, 0, one, rng)
    channels = unit_to_u8(unit) if one == U8_MAX else unit_to_u16(unit)
    return tuple(int(c) for c in channels)


def mix_pigment(
    colors: Sequence[Sequence[float]],
    weights: Sequence[float],
    encoding: Encoding = Encoding.U8,
    transform: PigmentTransform | None = None,
) -> Pigment:
    """
    Weighted sum of the colors as pigments, before conversion back to color.

    Weights are used as given. The opacity of the result is ``sum(weights)``.
    """
    if len(colors) != len(weights):
        raise InvalidArgumentError(
            f"Got {len(colors)} colors but {len(weights)} weights"
        )
    if len(colors) == 0:
        raise InvalidArgumentError("Need at least one color to mix")

    transform = transform if transform is not None else default_transform()
    pigments = [
        Pigment.from_linear(*to_linear(color, encoding), transform=transform)
        for color in colors
    ]
    return weighted_sum(pigments, weights)


def mix(
    colors: Sequence[Sequence[float]],
    weights: Sequence[float],
    encoding: Encoding = Encoding.U8,
    transform: PigmentTransform | None = None,
    rng: np.random.Generator | None = None,
) -> Tuple:
    """
    Mix N colors with arbitrary weights.

    Args:
        colors: Color triples, all stored in ``encoding``.
        weights: One weight per color. Not renormalized.
        encoding: Channel encoding of both the inputs and the result.
        transform: Pigment transform (the shared default if not provided).
        rng: Dither integer results with this generator instead of rounding.

    Raises:
        InvalidArgumentError: ``colors`` and ``weights`` differ in length,
            are empty, or a color is not a triple.
    """
    transform = transform if transform is not None else default_transform()
    pigment = mix_pigment(colors, weights, encoding, transform)
    return from_linear(pigment.to_linear(transform), encoding, rng)


def _pair_weights(ratio: float) -> Tuple[float, float]:
    # Two-color ratios are clamped to [0, 1], like Pigment.from_mix.
    ratio = min(max(float(ratio), 0.0), 1.0)
    return 1.0 - ratio, ratio


def mix_srgb_u8(
    srgb_a: Sequence[int],
    srgb_b: Sequence[int],
    ratio: float,
    transform: PigmentTransform | None = None,
) -> Tuple[int, int, int]:
    """
    Mix two ``u8`` encoded sRGB colors (0 = all ``srgb_a``, 1 = all ``srgb_b``).

    ``ratio`` is clamped to [0, 1]; use :func:`mix` to extrapolate.

    Colors are linearized internally; the result is encoded sRGB again.
    """
    return mix([srgb_a, srgb_b], _pair_weights(ratio), Encoding.U8, transform)


def mix_srgb_u8_dither(
    srgb_a: Sequence[int],
    srgb_b: Sequence[int],
    ratio: float,
    rng: np.random.Generator | None = None,
    transform: PigmentTransform | None = None,
) -> Tuple[int, int, int]:
    """Like :func:`mix_srgb_u8`, but quantized with a 0.5 amplitude dither."""
    if rng is None:
        rng = np.random.default_rng()
    return mix([srgb_a, srgb_b], _pair_weights(ratio), Encoding.U8, transform, rng)


def mix_srgb_f32(
    srgb_a: Sequence[float],
    srgb_b: Sequence[float],
    ratio: float,
    transform: PigmentTransform | None = None,
) -> Tuple[float, float, float]:
    """Mix two float encoded sRGB colors in [0, 1]."""
    return mix([srgb_a, srgb_b], _pair_weights(ratio), Encoding.F32, transform)


def mix_linear_srgb(
    linear_a: Sequence[float],
    linear_b: Sequence[float],
    ratio: float,
    transform: PigmentTransform | None = None,
) -> Tuple[float, float, float]:
    """Mix two linear sRGB colors; the result is linear too."""
    return mix([linear_a, linear_b], _pair_weights(ratio), Encoding.LINEAR, transform)


def mix_linear_srgb_u16(
    linear_a: Sequence[int],
    linear_b: Sequence[int],
    ratio: float,
    transform: PigmentTransform | None = None,
) -> Tuple[int, int, int]:
    """Mix two ``u16`` linear sRGB colors; the result is ``u16`` linear too."""
    return mix([linear_a, linear_b], _pair_weights(ratio), Encoding.LINEAR_U16, transform)


def mix_linear_srgb_u16_dither(
    linear_a: Sequence[int],
    linear_b: Sequence[int],
    ratio: float,
    rng: np.random.Generator | None = None,
    transform: PigmentTransform | None = None,
) -> Tuple[int, int, int]:
    """Like :func:`mix_linear_srgb_u16`, but quantized with a 0.5 amplitude dither."""
    if rng is None:
        rng = np.random.default_rng()
    return mix(
        [linear_a, linear_b], _pair_weights(ratio), Encoding.LINEAR_U16, transform, rng
    )
