"""
Pigment transforms: linear RGB <-> latent pigment vector.

A transform is an injectable capability. :class:`KubelkaMunkTransform` is
the Mixbox-style implementation::

    to_latent(rgb) -> [c1, c2, c3, c4, rR, rG, rB]
    to_rgb(latent) -> (r, g, b)

Both directions work strictly on linear light; gamma encoding is left to
:mod:`pigment_mixing.codec`.
"""

import functools
import logging
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from .colorants import CMYW_PALETTE
from .errors import InvalidArgumentError
from .km_core import Colorant, KubelkaMunk
from .unmixer import LinearRGBUnmixer

log = logging.getLogger(__name__)


LATENT_SIZE = 7  # 4 concentrations + 3 residuals


class PigmentTransform(ABC):
    """Maps linear RGB into a latent space where mixing is a weighted sum."""

    latent_size: int

    @abstractmethod
    def to_latent(self, linear_rgb: Sequence[float]) -> np.ndarray:
        """Encode a linear RGB triple into a latent vector."""

    @abstractmethod
    def to_rgb(self, latent: np.ndarray) -> np.ndarray:
        """Decode a latent vector into a linear RGB triple (not clamped)."""


class KubelkaMunkTransform(PigmentTransform):
    """
    Latent space made of colorant concentrations plus an RGB residual.

    The residual is whatever part of the color the palette cannot reproduce,
    kept in linear light so that ``to_rgb(to_latent(x))`` returns ``x``.
    """

    latent_size = LATENT_SIZE

    def __init__(
        self,
        palette: Sequence[Colorant] = CMYW_PALETTE,
        km: KubelkaMunk | None = None,
        method: str = "SLSQP",
        maxiter: int = 50,
        ftol: float = 1e-6,
    ):
        """
        Args:
            palette: Exactly 4 colorants (e.g. CMYW, CMYK, RYBW).
            km: Kubelka-Munk solver (creates one if not provided).
            method, maxiter, ftol: Unmixing optimizer settings.
        """
        if len(palette) != 4:
            raise InvalidArgumentError("Must provide exactly 4 colorants")

        self.palette = tuple(palette)
        self.km = km if km is not None else KubelkaMunk()
        self.unmixer = LinearRGBUnmixer(
            self.palette, self.km, method=method, maxiter=maxiter, ftol=ftol
        )
        log.debug("Kubelka-Munk transform over palette %s",
                  [c.name for c in self.palette])

    def to_latent(self, linear_rgb: Sequence[float]) -> np.ndarray:
        concentrations, residual = self.unmixer.unmix_with_residual(linear_rgb)

        latent = np.zeros(LATENT_SIZE)
        latent[0:4] = concentrations
        latent[4:7] = residual
        return latent

    def to_rgb(self, latent: np.ndarray) -> np.ndarray:
        latent = np.asarray(latent, dtype=np.float64)
        if latent.shape != (LATENT_SIZE,):
            raise InvalidArgumentError(
                f"Latent vector must have {LATENT_SIZE} components, got shape {latent.shape}"
            )

        mixed = self.km.mix_to_linear(self.palette, latent[0:4])
        return mixed + latent[4:7]

    def concentrations(self, linear_rgb: Sequence[float]) -> np.ndarray:
        """Colorant ratios ``[c1, c2, c3, c4]`` (sum to 1) for a linear color."""
        return self.to_latent(linear_rgb)[0:4]


@functools.lru_cache(maxsize=None)
def default_transform() -> KubelkaMunkTransform:
    """Shared CMYW Kubelka-Munk transform used when none is injected."""
    return KubelkaMunkTransform()
