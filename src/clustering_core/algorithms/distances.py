"""
Pre-metrics for seeding and validation.

A pre-metric is any non-negative dissimilarity; it need not satisfy the
triangle inequality (squared Euclidean does not). Samples are rows.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Union

import numpy as np

from .errors import DimensionMismatch, UnknownAlgorithmError

Array2D = np.ndarray


def _as_rows(X) -> Array2D:
    X = np.asarray(X, dtype=np.float64)
    if X.ndim == 1:
        X = X.reshape(1, -1)
    if X.ndim != 2:
        raise DimensionMismatch(f"Expected a 2-D sample matrix, got shape {X.shape}")
    return X


def _check_dims(X: Array2D, y: np.ndarray) -> None:
    if X.shape[1] != y.shape[-1]:
        raise DimensionMismatch(
            f"Feature dimensions differ: {X.shape[1]} vs {y.shape[-1]}"
        )


class PreMetric(ABC):
    """Dissimilarity between samples, single or batched."""

    name: str = ""

    @abstractmethod
    def distance(self, x, y) -> float:
        """Dissimilarity between two samples."""

    @abstractmethod
    def colwise(self, X, y) -> np.ndarray:
        """
        Dissimilarity from every row of *X* to the sample *y*.

        Args:
            X: (n, d) samples
            y: (d,) sample

        Returns:
            (n,) array of dissimilarities
        """

    def pairwise(self, X, Y=None) -> Array2D:
        """
        All-pairs dissimilarities between the rows of *X* and *Y*.

        Args:
            X: (n, d) samples
            Y: (m, d) samples; defaults to *X*

        Returns:
            (n, m) dissimilarity matrix
        """
        X = _as_rows(X)
        Y = X if Y is None else _as_rows(Y)
        _check_dims(X, Y)
        out = np.empty((X.shape[0], Y.shape[0]), dtype=np.float64)
        for j in range(Y.shape[0]):
            out[:, j] = self.colwise(X, Y[j])
        return out

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SqEuclidean(PreMetric):
    """Squared Euclidean distance ``||x - y||^2``."""

    name = "sqeuclidean"

    def distance(self, x, y) -> float:
        diff = np.asarray(x, dtype=np.float64) - np.asarray(y, dtype=np.float64)
        return float(diff @ diff)

    def colwise(self, X, y) -> np.ndarray:
        X = _as_rows(X)
        y = np.asarray(y, dtype=np.float64)
        _check_dims(X, y)
        diffs = X - y
        return np.einsum("nd,nd->n", diffs, diffs)

    def pairwise(self, X, Y=None) -> Array2D:
        # ||x - y||² = ||x||² + ||y||² - 2·x·y
        X = _as_rows(X)
        Y = X if Y is None else _as_rows(Y)
        _check_dims(X, Y)
        X_sq = np.sum(X ** 2, axis=1, keepdims=True)      # (n, 1)
        Y_sq = np.sum(Y ** 2, axis=1, keepdims=True).T    # (1, m)
        dists = X_sq + Y_sq - 2.0 * (X @ Y.T)
        return np.maximum(dists, 0.0)


class Euclidean(PreMetric):
    """Euclidean distance ``||x - y||``."""

    name = "euclidean"

    def distance(self, x, y) -> float:
        return float(np.sqrt(SqEuclidean().distance(x, y)))

    def colwise(self, X, y) -> np.ndarray:
        return np.sqrt(SqEuclidean().colwise(X, y))

    def pairwise(self, X, Y=None) -> Array2D:
        return np.sqrt(SqEuclidean().pairwise(X, Y))


class CosineDist(PreMetric):
    """Cosine distance ``1 - cos(x, y)``; zero vectors are treated as unit-free."""

    name = "cosine"

    def distance(self, x, y) -> float:
        return float(self.colwise(np.asarray(x).reshape(1, -1), y)[0])

    def colwise(self, X, y) -> np.ndarray:
        X = _as_rows(X)
        y = np.asarray(y, dtype=np.float64)
        _check_dims(X, y)
        x_norms = np.maximum(np.linalg.norm(X, axis=1), 1e-12)
        y_norm = max(float(np.linalg.norm(y)), 1e-12)
        sims = (X @ y) / (x_norms * y_norm)
        return np.clip(1.0 - sims, 0.0, 2.0)

    def pairwise(self, X, Y=None) -> Array2D:
        X = _as_rows(X)
        Y = X if Y is None else _as_rows(Y)
        _check_dims(X, Y)
        X_norm = X / np.maximum(np.linalg.norm(X, axis=1, keepdims=True), 1e-12)
        Y_norm = Y / np.maximum(np.linalg.norm(Y, axis=1, keepdims=True), 1e-12)
        return np.clip(1.0 - (X_norm @ Y_norm.T), 0.0, 2.0)


_METRICS = {
    "sqeuclidean": SqEuclidean,
    "euclidean": Euclidean,
    "cosine": CosineDist,
}


def get_metric(metric: Optional[Union[str, PreMetric]] = None) -> PreMetric:
    """
    Resolve a metric name or instance.

    Args:
        metric: ``"sqeuclidean"``, ``"euclidean"``, ``"cosine"``, a
            ``PreMetric`` instance, or ``None`` for squared Euclidean

    Returns:
        A PreMetric instance

    Raises:
        UnknownAlgorithmError: If the name is not recognized
    """
    if metric is None:
        return SqEuclidean()
    if isinstance(metric, PreMetric):
        return metric
    key = str(metric).lower()
    if key not in _METRICS:
        raise UnknownAlgorithmError(
            f"Unknown distance metric '{metric}'. "
            f"Expected one of {', '.join(sorted(_METRICS))}."
        )
    return _METRICS[key]()
