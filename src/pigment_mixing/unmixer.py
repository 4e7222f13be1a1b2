"""
Linear RGB Unmixing - Converting colors back to colorant concentrations.

Implements the inverse of the ``mix()`` function using constrained
optimization (Equation 9 from the Mixbox paper).
"""

import itertools
import logging
from typing import Sequence, Tuple

import numpy as np
from scipy.optimize import minimize

from .codec import encode
from .km_core import Colorant, KubelkaMunk

log = logging.getLogger(__name__)


def simplex_grid(n: int, steps: int) -> np.ndarray:
    """All n-component concentration vectors with entries in multiples of 1/steps."""
    points = [
        np.diff((0, *cuts, steps)) / steps
        for cuts in itertools.combinations_with_replacement(range(steps + 1), n - 1)
    ]
    return np.array(points, dtype=np.float64)


class LinearRGBUnmixer:
    """
    Unmixes linear RGB colors into colorant concentrations.

    Solves the optimization problem from Equation 9::

        unmix(RGB) = argmin_c ||encode(mix(c)) - encode(RGB)||^2
        subject to: c_i >= 0 and sum(c_i) = 1

    The distance is measured on gamma-encoded values so that errors in dark
    colors weigh as much as the eye sees them.

    The objective has local minima, so the optimizer starts from the closest
    point of a coarse grid over the simplex, precomputed once per unmixer.
    """

    def __init__(
        self,
        colorants: Sequence[Colorant],
        km: KubelkaMunk | None = None,
        method: str = "SLSQP",
        maxiter: int = 50,
        ftol: float = 1e-6,
        grid_steps: int = 20,
    ):
        """
        Args:
            colorants: Base colorants of the palette.
            km: Kubelka-Munk solver (creates one if not provided).
            method: ``scipy.optimize.minimize`` method.
            maxiter, ftol: Optimizer stopping criteria.
            grid_steps: Subdivisions per axis of the starting-point grid.
        """
        self.colorants = tuple(colorants)
        self.n_colorants = len(self.colorants)
        self.km = km if km is not None else KubelkaMunk()
        self.method = method
        self.maxiter = maxiter
        self.ftol = ftol

        self._grid = simplex_grid(self.n_colorants, grid_steps)
        self._grid_colors = np.array([
            encode(self.km.mix_to_linear(self.colorants, c)) for c in self._grid
        ])

    def _closest_grid_point(self, target: np.ndarray) -> np.ndarray:
        errors = np.sum((self._grid_colors - target) ** 2, axis=1)
        return self._grid[np.argmin(errors)].copy()

    def _distance(self, concentrations: np.ndarray, target: np.ndarray) -> float:
        mixed = encode(self.km.mix_to_linear(self.colorants, concentrations))
        return float(np.sum((mixed - target) ** 2))

    def unmix(
        self,
        linear_rgb: Sequence[float],
        initial_guess: np.ndarray | None = None,
    ) -> np.ndarray:
        """
        Unmix a linear RGB color into colorant concentrations.

        Returns:
            Array of N concentrations that sum to 1.
        """
        target = encode(np.asarray(linear_rgb, dtype=np.float64))
        if initial_guess is None:
            initial_guess = self._closest_grid_point(target)
        constraints = [{"type": "eq", "fun": lambda c: np.sum(c) - 1.0}]
        bounds = [(0.0, 1.0) for _ in range(self.n_colorants)]

        result = minimize(
            fun=lambda c: self._distance(c, target),
            x0=initial_guess,
            method=self.method,
            bounds=bounds,
            constraints=constraints,
            options={"maxiter": self.maxiter, "ftol": self.ftol},
        )

        if not result.success:
            log.warning("Unmixing did not converge for linear RGB %s: %s",
                        tuple(linear_rgb), result.message)

        x = np.clip(result.x, 0.0, 1.0)
        if self._distance(x, target) > self._distance(initial_guess, target):
            x = np.asarray(initial_guess, dtype=np.float64)
        total = np.sum(x)
        if total <= 0:
            return np.ones(self.n_colorants) / self.n_colorants
        return x / total

    def unmix_with_residual(
        self, linear_rgb: Sequence[float]
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Unmix to concentrations + residual (full latent representation).

        Returns:
            concentrations: Colorant concentrations.
            residual: Linear RGB residual (additive correction).
        """
        concentrations = self.unmix(linear_rgb)
        mixed = self.km.mix_to_linear(self.colorants, concentrations)
        residual = np.asarray(linear_rgb, dtype=np.float64) - mixed
        return concentrations, residual
