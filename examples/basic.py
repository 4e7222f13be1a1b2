#!/usr/bin/env python3
"""
Two-color mixing with the convenience API.

Mixes bright yellow with deep blue and compares the result against naive
RGB interpolation.
"""

import numpy as np

from pigment_mixing import mix_srgb_u8


def main():
    bright_yellow = (252, 211, 0)
    deep_blue = (0, 0, 96)

    print(f"{'t':>5}  {'pigment':>18}  {'naive rgb':>18}")
    for t in np.linspace(0.0, 1.0, 5):
        mixed = mix_srgb_u8(bright_yellow, deep_blue, t)
        naive = tuple(int(round((1 - t) * a + t * b)) for a, b in zip(bright_yellow, deep_blue))
        print(f"{t:5.2f}  {str(mixed):>18}  {str(naive):>18}")


if __name__ == "__main__":
    main()
