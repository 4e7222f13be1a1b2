#!/usr/bin/env python3
"""
Mixing three colors with the Pigment algebra.

Each pigment is weighted one third; the sum is converted back to color.
"""

from pigment_mixing import Pigment, encode


def main():
    bright_yellow = Pigment.from_srgb_u8(252, 211, 0)
    deep_blue = Pigment.from_srgb_u8(0, 0, 96)
    medium_red = Pigment.from_srgb_u8(201, 37, 44)

    weight = 1.0 / 3.0
    result = bright_yellow * weight + weight * deep_blue + weight * medium_red

    linear = result.to_linear()
    print(f"Linear sRGB:  {tuple(round(float(c), 4) for c in linear)}")
    print(f"Encoded sRGB: {tuple(round(float(c), 4) for c in encode(linear))}")
    print(f"u8 sRGB:      {result.to_srgb_u8()}")
    print(f"Opacity:      {result.opacity:.3f}")


if __name__ == "__main__":
    main()
