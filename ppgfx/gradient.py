"""Generate a red/green gradient framebuffer and save it as raw RGB."""

from __future__ import annotations

import argparse

import numpy as np

from ppgfx.image import Image

SIZE = 512


def gradient(size=SIZE):
    """Return a square image whose red grows down the rows and green across columns."""
    image = Image(size, size)
    steps = ((np.arange(size) // 2) % 256).astype(np.uint8)
    image.pixels[..., 0] = steps[:, None]
    image.pixels[..., 1] = steps[None, :]
    image.pixels[..., 2] = 0
    return image


def main(argv=None):
    parser = argparse.ArgumentParser(description="Write a gradient as a raw RGB image.")
    parser.add_argument("output", nargs="?", default="raw1_gradient.raw")
    parser.add_argument("--size", type=int, default=SIZE)
    args = parser.parse_args(argv)

    image = gradient(args.size)
    print(f"Generating {args.output} file ...")
    image.save_raw(args.output)
    print("Done.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())