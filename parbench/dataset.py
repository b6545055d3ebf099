"""Synthetic point clouds for the clustering benchmarks."""

from __future__ import annotations

import math
import os
from typing import Union

SEED = 12345

_MASK32 = 0xFFFFFFFF
_STATE_SIZE = 624
_SHIFT_SIZE = 397
_TWO_32 = 1 << 32


class _Mt19937:
    """32-bit Mersenne Twister seeded the way a single-integer seed is."""

    def __init__(self, seed: int) -> None:
        state = [seed & _MASK32]
        for i in range(1, _STATE_SIZE):
            previous = state[-1]
            state.append((1812433253 * (previous ^ (previous >> 30)) + i) & _MASK32)
        self._state = state
        self._index = _STATE_SIZE

    def _twist(self) -> None:
        mt = self._state
        for i in range(_STATE_SIZE):
            y = (mt[i] & 0x80000000) | (mt[(i + 1) % _STATE_SIZE] & 0x7FFFFFFF)
            value = mt[(i + _SHIFT_SIZE) % _STATE_SIZE] ^ (y >> 1)
            if y & 1:
                value ^= 0x9908B0DF
            mt[i] = value
        self._index = 0

    def next_u32(self) -> int:
        """Return the next raw 32-bit output."""
        if self._index >= _STATE_SIZE:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y

    def uniform_int(self, low: int, high: int) -> int:
        """Return an integer uniformly drawn from the closed range [low, high]."""
        span = high - low + 1
        if span <= 0:
            raise ValueError("empty integer range")
        if span > _TWO_32:
            raise OverflowError("integer range wider than 32 bits")
        if span == _TWO_32:
            return low + self.next_u32()
        product = self.next_u32() * span
        low_bits = product & _MASK32
        if low_bits < span:
            threshold = (_TWO_32 - span) % span
            while low_bits < threshold:
                product = self.next_u32() * span
                low_bits = product & _MASK32
        return low + (product >> 32)

    def _canonical(self) -> float:
        total = float(self.next_u32()) + float(self.next_u32()) * float(_TWO_32)
        value = total / float(_TWO_32 * _TWO_32)
        return value if value < 1.0 else math.nextafter(1.0, 0.0)

    def uniform_real(self, low: float, high: float) -> float:
        """Return a float uniformly drawn from [low, high)."""
        return self._canonical() * (high - low) + low


def generate_dataset_csv(
    n_samples: int, dim: int, filename: Union[str, "os.PathLike[str]"]
) -> None:
    """Write n_samples points of dim coordinates, uniform in [0, 10), as CSV.

    The first line is a header ``x0,x1,...``; every following line is one point.
    The generator is seeded with a fixed value, so output is reproducible.
    """
    if dim < 0:
        raise ValueError(f"dimension must not be negative, got {dim}")
    rng = _Mt19937(SEED)
    with open(filename, "w", encoding="ascii", newline="") as out:
        out.write(",".join(f"x{j}" for j in range(dim)) + "\n")
        for _ in range(n_samples):
            out.write(
                ",".join(f"{rng.uniform_real(0.0, 10.0):g}" for _ in range(dim)) + "\n"
            )