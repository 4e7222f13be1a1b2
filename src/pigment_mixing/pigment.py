"""
The mixable pigment value type.

A :class:`Pigment` is a latent vector plus an opacity. Weighted sums of
pigments are how colors are mixed::

    yellow = Pigment.from_srgb_u8(252, 211, 0)
    red = Pigment.from_srgb_u8(201, 37, 44)
    blue = Pigment.from_srgb_u8(0, 0, 96)

    w = 1.0 / 3.0
    result = w * yellow + w * red + w * blue
    linear_rgb = result.to_linear()

Pigments are immutable; every operation returns a new value. A pigment
remembers the transform that produced its latent vector, and pigments from
different transforms cannot be added together.
"""

from numbers import Real
from typing import Sequence

import numpy as np

from .codec import decode, encode, u8_to_unit, u16_to_unit, unit_to_u8, unit_to_u16
from .errors import InvalidArgumentError
from .transform import PigmentTransform, default_transform


class Pigment:
    """A latent pigment vector and the opacity it accumulates under mixing.

    ``transform`` is the transform the latent vector belongs to; ``None``
    stands for :func:`default_transform`.
    """

    __slots__ = ("_latent", "_opacity", "_transform")

    # numpy scalars defer to our reflected operators instead of broadcasting.
    __array_ufunc__ = None

    def __init__(
        self, latent, opacity: float = 1.0, transform: PigmentTransform | None = None
    ):
        latent = np.array(latent, dtype=np.float64)
        if latent.ndim != 1:
            raise InvalidArgumentError(
                f"Latent vector must be one-dimensional, got shape {latent.shape}"
            )
        latent.flags.writeable = False
        self._latent = latent
        self._opacity = float(opacity)
        self._transform = transform

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_latent(
        cls, latent, opacity: float = 1.0, transform: PigmentTransform | None = None
    ) -> "Pigment":
        """Wrap a raw latent vector produced by ``transform``."""
        return cls(latent, opacity, transform)

    @classmethod
    def from_linear(
        cls, r: float, g: float, b: float, transform: PigmentTransform | None = None
    ) -> "Pigment":
        """Construct from a linear sRGB (gamma 1.0) color."""
        latent = _resolve(transform).to_latent((r, g, b))
        return cls(latent, 1.0, transform)

    @classmethod
    def from_srgb_f32(
        cls, r: float, g: float, b: float, transform: PigmentTransform | None = None
    ) -> "Pigment":
        """Construct from a float encoded sRGB color in [0, 1]."""
        return cls.from_linear(*decode((r, g, b)), transform=transform)

    @classmethod
    def from_srgb_u8(
        cls, r: int, g: int, b: int, transform: PigmentTransform | None = None
    ) -> "Pigment":
        """Construct from a ``u8`` encoded sRGB (gamma 2.2) color."""
        return cls.from_srgb_f32(*u8_to_unit((r, g, b)), transform=transform)

    @classmethod
    def from_srgb_u16(
        cls, r: int, g: int, b: int, transform: PigmentTransform | None = None
    ) -> "Pigment":
        """Construct from a ``u16`` encoded sRGB color."""
        return cls.from_srgb_f32(*u16_to_unit((r, g, b)), transform=transform)

    @classmethod
    def from_linear_u16(
        cls, r: int, g: int, b: int, transform: PigmentTransform | None = None
    ) -> "Pigment":
        """Construct from a ``u16`` linear sRGB color."""
        return cls.from_linear(*u16_to_unit((r, g, b)), transform=transform)

    @classmethod
    def from_mix(cls, a: "Pigment", b: "Pigment", ratio: float) -> "Pigment":
        """``(1 - ratio) * a + ratio * b`` with ``ratio`` clamped to [0, 1]."""
        ratio = min(max(float(ratio), 0.0), 1.0)
        return combine(scale(a, 1.0 - ratio), scale(b, ratio))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def latent(self) -> np.ndarray:
        """Read-only latent vector."""
        return self._latent

    @property
    def opacity(self) -> float:
        return self._opacity

    @property
    def transform(self) -> PigmentTransform:
        """The transform that decodes this pigment's latent vector."""
        return _resolve(self._transform)

    def __len__(self):
        return len(self._latent)

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._latent.copy() if copy else self._latent
        return self._latent.astype(dtype)

    def __repr__(self):
        values = ", ".join(f"{v:.4g}" for v in self._latent)
        return f"Pigment([{values}], opacity={self._opacity:.4g})"

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def mix(self, other: "Pigment", ratio: float) -> "Pigment":
        """Mix with another pigment; returns a new pigment."""
        return Pigment.from_mix(self, other, ratio)

    def __mul__(self, weight):
        if isinstance(weight, Real):
            return scale(self, weight)
        return NotImplemented

    __rmul__ = __mul__

    def __add__(self, other):
        if isinstance(other, Pigment):
            return combine(self, other)
        return NotImplemented

    def __radd__(self, other):
        # Lets the builtin sum() start from 0.
        if isinstance(other, Real) and other == 0:
            return self
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Pigment):
            return NotImplemented
        return (
            self._opacity == other._opacity
            and np.array_equal(self._latent, other._latent)
        )

    __hash__ = None

    def isclose(self, other: "Pigment", rtol: float = 1e-9, atol: float = 1e-12) -> bool:
        """Tolerance-based equality of latent vectors and opacities."""
        return (
            self._latent.shape == other._latent.shape
            and np.isclose(self._opacity, other._opacity, rtol=rtol, atol=atol)
            and np.allclose(self._latent, other._latent, rtol=rtol, atol=atol)
        )

    # ------------------------------------------------------------------
    # Conversion back to color
    # ------------------------------------------------------------------

    def to_linear(self, transform: PigmentTransform | None = None) -> np.ndarray:
        """Linear sRGB color of this pigment. Opacity is not applied.

        Decodes with the pigment's own transform unless another is given.
        """
        transform = transform if transform is not None else self.transform
        return np.asarray(transform.to_rgb(self._latent), dtype=np.float64)

    def to_srgb_f32(self, transform: PigmentTransform | None = None) -> np.ndarray:
        """Encoded sRGB floats in [0, 1]."""
        return encode(self.to_linear(transform))

    def to_srgb_u8(self, transform: PigmentTransform | None = None) -> tuple:
        """Encoded sRGB ``(r, g, b)`` in [0, 255]."""
        return tuple(int(c) for c in unit_to_u8(self.to_srgb_f32(transform)))

    def to_srgb_u16(self, transform: PigmentTransform | None = None) -> tuple:
        """Encoded sRGB ``(r, g, b)`` in [0, 65535]."""
        return tuple(int(c) for c in unit_to_u16(self.to_srgb_f32(transform)))


def scale(pigment: Pigment, weight: float) -> Pigment:
    """Multiply latent vector and opacity by ``weight``."""
    return Pigment(pigment.latent * weight, pigment.opacity * weight, pigment._transform)


def combine(a: Pigment, b: Pigment) -> Pigment:
    """Element-wise sum of two pigments' latent vectors and opacities."""
    if a.latent.shape != b.latent.shape:
        raise InvalidArgumentError(
            f"Cannot combine pigments with latent sizes {len(a)} and {len(b)}"
        )
    if a._transform is not b._transform and a.transform is not b.transform:
        raise InvalidArgumentError("Cannot combine pigments from different transforms")
    return Pigment(a.latent + b.latent, a.opacity + b.opacity, a._transform)


def weighted_sum(pigments: Sequence[Pigment], weights: Sequence[float]) -> Pigment:
    """``sum(w_i * p_i)``; requires ``len(pigments) == len(weights) >= 1``."""
    if len(pigments) != len(weights):
        raise InvalidArgumentError(
            f"Got {len(pigments)} pigments but {len(weights)} weights"
        )
    if len(pigments) == 0:
        raise InvalidArgumentError("Need at least one pigment to mix")

    result = scale(pigments[0], weights[0])
    for pigment, weight in zip(pigments[1:], weights[1:]):
        result = combine(result, scale(pigment, weight))
    return result


def _resolve(transform: PigmentTransform | None) -> PigmentTransform:
    return transform if transform is not None else default_transform()
