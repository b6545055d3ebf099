"""Multi-threaded Lloyd's k-means clustering."""

from __future__ import annotations

import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Optional

import numpy as np

from parbench.sequential import (
    _accumulate,
    _as_points,
    _converged,
    _initial_centroids,
    _mean,
    _nearest,
    _predict,
)


class ParallelKMeans:
    """K-means whose assignment and update steps are split across threads."""

    def __init__(
        self,
        k: int,
        max_iters: int = 100,
        tol: float = 1e-4,
        n_threads: Optional[int] = None,
    ) -> None:
        if k < 0:
            raise ValueError(f"number of clusters must not be negative, got {k}")
        if n_threads is None:
            n_threads = os.cpu_count() or 1
        if n_threads < 1:
            raise ValueError(f"thread count must be at least 1, got {n_threads}")
        self.k = k
        self.max_iters = max_iters
        self.tol = tol
        self.n_threads = n_threads
        self._centroids = np.zeros((k, 0))
        self._assignments = np.empty(0, dtype=np.intp)

    def fit(self, data: Sequence[Sequence[float]]) -> "ParallelKMeans":
        """Cluster data; an empty data set leaves the model unchanged.

        Assignments are those of the last assignment step, made before the
        final centroid update.
        """
        points = _as_points(data)
        if points is None:
            return self
        self._assignments = np.full(len(points), -1, dtype=np.intp)
        parts = min(self.n_threads, len(points))
        blocks = np.array_split(points, parts)
        centroids = _initial_centroids(points, self.k)
        with ThreadPoolExecutor(max_workers=parts) as pool:
            for _ in range(self.max_iters):
                labels = np.concatenate(
                    list(pool.map(partial(_nearest, centroids=centroids), blocks))
                )
                self._assignments = labels
                partials = list(
                    pool.map(
                        partial(_accumulate, k=self.k),
                        blocks,
                        np.array_split(labels, parts),
                    )
                )
                sums = sum(block_sums for block_sums, _ in partials)
                counts = sum(block_counts for _, block_counts in partials)
                updated = _mean(sums, counts)
                done = _converged(centroids, updated, self.tol)
                centroids = updated
                if done:
                    break
        self._centroids = centroids
        return self

    def predict(self, point: Sequence[float]) -> int:
        """Return the index of the centroid closest to point, or -1 if there is none."""
        return _predict(self._centroids, point)

    @property
    def centroids(self) -> list[list[float]]:
        """The centroids, one list of coordinates per cluster."""
        return self._centroids.tolist()

    @property
    def assignments(self) -> list[int]:
        """The cluster of each fitted sample."""
        return self._assignments.tolist()