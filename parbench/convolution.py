"""Direct 2-D correlation of images with a small kernel on the CPU."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


class CpuConvolution:
    """Applies a kernel to every pixel, treating pixels beyond the border as zero.

    The kernel is anchored at (rows // 2, cols // 2) and is not flipped.
    """

    def __init__(self, kernel: ArrayLike) -> None:
        weights = np.asarray(kernel)
        if weights.ndim != 2 or weights.size == 0:
            raise ValueError(f"kernel must be a non-empty 2-D array, got shape {weights.shape}")
        if not np.issubdtype(weights.dtype, np.number) or np.iscomplexobj(weights):
            raise TypeError(f"kernel must hold real numbers, got {weights.dtype}")
        self.kernel = weights.astype(np.float32)
        rows, cols = self.kernel.shape
        self._center = (rows // 2, cols // 2)

    def apply(self, image: ArrayLike) -> np.ndarray:
        """Return the filtered image as float32, with the input's shape.

        A 2-D image is one channel; a 3-D image is height x width x channels.
        """
        pixels = np.asarray(image)
        if pixels.ndim not in (2, 3):
            raise ValueError(f"image must be 2-D or 3-D, got shape {pixels.shape}")
        if not np.issubdtype(pixels.dtype, np.number) or np.iscomplexobj(pixels):
            raise TypeError(f"image must hold real numbers, got {pixels.dtype}")
        source = pixels.astype(np.float32)
        output = np.zeros(source.shape, dtype=np.float32)
        height, width = source.shape[:2]
        center_y, center_x = self._center

        for (m, n), weight in np.ndenumerate(self.kernel):
            dy = m - center_y
            dx = n - center_x
            y0, y1 = max(0, -dy), min(height, height - dy)
            x0, x1 = max(0, -dx), min(width, width - dx)
            if y0 >= y1 or x0 >= x1:
                continue
            output[y0:y1, x0:x1] += source[y0 + dy : y1 + dy, x0 + dx : x1 + dx] * weight
        return output