"""Dithered quantization of mixed colors to integer channels."""

from typing import Sequence, Tuple

import numpy as np


def generate_offset(rng: np.random.Generator) -> float:
    """Random number in the range -0.5 .. 0.5."""
    return float(rng.uniform(-0.5, 0.5))


def quantize_triplet(
    value: Sequence[float],
    one: float,
    lo: float,
    hi: float,
    rng: np.random.Generator | None = None,
) -> Tuple[int, int, int]:
    """
    Quantize a unit-range triple with a random dither of amplitude 0.5.

    The same offset is applied to all three channels so the dither does not
    shift hue.

    Args:
        value: Three channels in [0, 1].
        one: Integer value representing 1.0 (255 for u8, 65535 for u16).
        lo, hi: Clamp range of the output.
        rng: Random generator (a fresh one if not provided).
    """
    if rng is None:
        rng = np.random.default_rng()

    offset = generate_offset(rng)
    channels = np.clip(np.rint(one * np.asarray(value, dtype=np.float64) + offset), lo, hi)
    return tuple(int(c) for c in channels)
