"""Fixed convolution kernels used by the image-processing benchmarks."""

from __future__ import annotations

import numpy as np


def _square(values: list[float], size: int) -> np.ndarray:
    return np.array(values, dtype=np.float32).reshape(size, size)


def prewitt_x() -> np.ndarray:
    """3x3 Prewitt kernel for horizontal gradients."""
    return _square([-1, 0, 1, -1, 0, 1, -1, 0, 1], 3)


def prewitt_y() -> np.ndarray:
    """3x3 Prewitt kernel for vertical gradients."""
    return _square([-1, -1, -1, 0, 0, 0, 1, 1, 1], 3)


def gaussian_5x5() -> np.ndarray:
    """5x5 Gaussian blur kernel, normalised by 256."""
    weights = [
        1, 4, 6, 4, 1,
        4, 16, 24, 16, 4,
        6, 24, 36, 24, 6,
        4, 16, 24, 16, 4,
        1, 4, 6, 4, 1,
    ]
    return np.array(weights, dtype=np.float32).reshape(5, 5) / np.float32(256)


def gaussian_7x7() -> np.ndarray:
    """7x7 Gaussian blur kernel, normalised by 1003."""
    weights = [
        0, 0, 1, 2, 1, 0, 0,
        0, 3, 13, 22, 13, 3, 0,
        1, 13, 59, 97, 59, 13, 1,
        2, 22, 97, 159, 97, 22, 2,
        1, 13, 59, 97, 59, 13, 1,
        0, 3, 13, 22, 13, 3, 0,
        0, 0, 1, 2, 1, 0, 0,
    ]
    return np.array(weights, dtype=np.float32).reshape(7, 7) / np.float32(1003)


def laplacian_of_gaussian_5x5() -> np.ndarray:
    """5x5 Laplacian of Gaussian kernel."""
    return _square(
        [
            0, 0, -1, 0, 0,
            0, -1, -2, -1, 0,
            -1, -2, 16, -2, -1,
            0, -1, -2, -1, 0,
            0, 0, -1, 0, 0,
        ],
        5,
    )


def sharpen() -> np.ndarray:
    """3x3 sharpening kernel."""
    return _square([0, -1, 0, -1, 5, -1, 0, -1, 0], 3)