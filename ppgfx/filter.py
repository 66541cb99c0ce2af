"""Per-pixel filter: grayscale on the left half, brightened on the right half."""

from __future__ import annotations

import argparse

import numpy as np

from ppgfx.image import Image

GRAY_RED = 0.299
GRAY_GREEN = 0.587
GRAY_BLUE = 0.114

BRIGHTNESS_FACTOR = 1.5

SIZE = 512


def to_grayscale(r, g, b):
    """Return the luminance of an RGB colour as a byte."""
    return int(GRAY_RED * r + GRAY_GREEN * g + GRAY_BLUE * b)


def brighten(r, g, b, factor=BRIGHTNESS_FACTOR):
    """Scale each channel by factor, saturating at 255."""
    return tuple(min(int(c * factor), 255) for c in (r, g, b))


def apply_filter(image):
    """Return a new image with the left half gray and the right half brightened."""
    result = Image(image.width, image.height)
    source = image.pixels.astype(np.float64)
    half = image.width // 2

    left = source[:, :half]
    gray = (
        GRAY_RED * left[..., 0] + GRAY_GREEN * left[..., 1] + GRAY_BLUE * left[..., 2]
    ).astype(np.uint8)
    result.pixels[:, :half] = gray[..., None]

    right = (source[:, half:] * BRIGHTNESS_FACTOR).astype(np.int64)
    result.pixels[:, half:] = np.minimum(right, 255).astype(np.uint8)
    return result


def main(argv=None):
    parser = argparse.ArgumentParser(description="Filter a raw RGB image.")
    parser.add_argument("input", nargs="?", default="lena.raw")
    parser.add_argument("output", nargs="?", default="result.raw")
    parser.add_argument("--size", type=int, default=SIZE)
    args = parser.parse_args(argv)

    try:
        image = Image.load_raw(args.input, args.size, args.size)
    except (OSError, ValueError):
        print(f"Error while open {args.input}")
        return 1

    filtered = apply_filter(image)

    try:
        with open(args.output, "wb") as stream:
            print(f"Generating {args.output} file ...")
            stream.write(filtered.to_bytes())
    except OSError:
        print(f"Error while open {args.output}")
        return 1

    print("Done.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())