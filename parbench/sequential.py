"""Single-threaded Lloyd's k-means clustering."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

import numpy as np

from parbench.dataset import SEED, _Mt19937

_CHUNK_ROWS = 65536
_DBL_MAX = sys.float_info.max


def _as_points(data: Sequence[Sequence[float]]) -> Optional[np.ndarray]:
    """Return data as a 2-D float array, or None when there are no samples."""
    if len(data) == 0:
        return None
    points = np.array(data, dtype=float)
    if points.ndim != 2:
        raise ValueError("data must be a sequence of equally long points")
    return points


def _initial_centroids(points: np.ndarray, k: int) -> np.ndarray:
    rng = _Mt19937(SEED)
    picks = [rng.uniform_int(0, len(points) - 1) for _ in range(k)]
    return points[picks].copy()


def _nearest(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Label each point with the index of its closest centroid, first one on ties."""
    labels = np.full(len(points), -1, dtype=np.intp)
    if len(centroids) == 0:
        return labels
    for start in range(0, len(points), _CHUNK_ROWS):
        block = points[start : start + _CHUNK_ROWS]
        distances = ((block[:, None, :] - centroids[None, :, :]) ** 2).sum(axis=2)
        best = distances.argmin(axis=1)
        best_distance = distances[np.arange(len(block)), best]
        labels[start : start + len(block)] = np.where(best_distance < _DBL_MAX, best, -1)
    return labels


def _accumulate(
    points: np.ndarray, labels: np.ndarray, k: int
) -> tuple[np.ndarray, np.ndarray]:
    """Per-cluster coordinate sums and member counts, ignoring unlabelled points."""
    sums = np.zeros((k, points.shape[1]))
    valid = labels >= 0
    np.add.at(sums, labels[valid], points[valid])
    counts = np.bincount(labels[valid], minlength=k)
    return sums, counts


def _mean(sums: np.ndarray, counts: np.ndarray) -> np.ndarray:
    """Divide sums by counts; clusters without members stay at the origin."""
    centroids = sums.copy()
    filled = counts > 0
    centroids[filled] /= counts[filled, None]
    return centroids


def _converged(old: np.ndarray, new: np.ndarray, tol: float) -> bool:
    shift = np.sqrt(((old - new) ** 2).sum(axis=1))
    return not bool(np.any(shift > tol))


def _predict(centroids: np.ndarray, point: Sequence[float]) -> int:
    if centroids.size == 0:
        return -1
    vector = np.asarray(point, dtype=float)
    if vector.shape != (centroids.shape[1],):
        raise ValueError(
            f"point must have {centroids.shape[1]} coordinates, got shape {vector.shape}"
        )
    return int(_nearest(vector[None, :], centroids)[0])


class SequentialKMeans:
    """K-means with random initial centroids, run on one thread."""

    def __init__(self, k: int, max_iters: int = 100, tol: float = 1e-4) -> None:
        if k < 0:
            raise ValueError(f"number of clusters must not be negative, got {k}")
        self.k = k
        self.max_iters = max_iters
        self.tol = tol
        self._centroids = np.zeros((k, 0))
        self._assignments = np.empty(0, dtype=np.intp)

    def fit(self, data: Sequence[Sequence[float]]) -> "SequentialKMeans":
        """Cluster data; an empty data set leaves the model unchanged."""
        points = _as_points(data)
        if points is None:
            return self
        centroids = _initial_centroids(points, self.k)
        for _ in range(self.max_iters):
            labels = _nearest(points, centroids)
            updated = _mean(*_accumulate(points, labels, self.k))
            done = _converged(centroids, updated, self.tol)
            centroids = updated
            if done:
                break
        self._centroids = centroids
        self._assignments = _nearest(points, centroids)
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
        """The cluster of each fitted sample, matching the final centroids."""
        return self._assignments.tolist()