"""
Clustering result abstraction.

``ClusteringOutput`` is the structural contract consumed by the validation
metrics: anything with ``nclusters()``, ``assignments()`` and ``counts()``
qualifies, without inheriting from anything. ``ClusteringResult`` is the
concrete dataclass returned by clustering drivers in this package.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Sequence, Union, runtime_checkable

import numpy as np

from .errors import InvalidLabelError

Labels = Union[np.ndarray, Sequence[int]]


@runtime_checkable
class ClusteringOutput(Protocol):
    """Structural interface for the output of a partitional clustering."""

    def nclusters(self) -> int: ...
    def assignments(self) -> np.ndarray: ...
    def counts(self) -> np.ndarray: ...


def check_labels(labels: np.ndarray, k: int, name: str = "assignments") -> None:
    """
    Raise ``InvalidLabelError`` unless every label lies in ``[0, k)``.

    Args:
        labels: Integer label vector
        k: Number of clusters
        name: Argument name used in the error message
    """
    if labels.size == 0:
        return
    lo = int(labels.min())
    hi = int(labels.max())
    if lo < 0 or hi >= k:
        raise InvalidLabelError(
            f"{name} must lie in [0, {k}), got values in [{lo}, {hi}]"
        )


def counts_from_assignments(assignments: Labels, k: int) -> np.ndarray:
    """
    Count the points assigned to each of ``k`` clusters.

    Args:
        assignments: Label vector with values in ``[0, k)``
        k: Number of clusters

    Returns:
        Integer array of length ``k``; empty clusters have count 0.

    Raises:
        InvalidLabelError: If a label is outside ``[0, k)``
    """
    a = np.asarray(assignments, dtype=np.int64)
    check_labels(a, k)
    return np.bincount(a, minlength=k).astype(np.int64)


@dataclass
class ClusteringResult:
    """Result of a single clustering run."""

    labels: np.ndarray
    n_clusters: Optional[int] = None
    objective: float = 0.0
    n_iter: int = 0
    metadata: Dict[str, Any] = None

    def __post_init__(self):
        """Normalize labels, infer the cluster count and validate."""
        if self.metadata is None:
            self.metadata = {}
        self.labels = np.asarray(self.labels, dtype=np.int64)
        if self.n_clusters is None:
            self.n_clusters = int(self.labels.max()) + 1 if self.labels.size else 1
        if self.n_clusters < 1:
            raise ValueError(f"n_clusters must be >= 1, got {self.n_clusters}")
        check_labels(self.labels, self.n_clusters, name="labels")

    def nclusters(self) -> int:
        return int(self.n_clusters)

    def assignments(self) -> np.ndarray:
        return self.labels

    def counts(self) -> np.ndarray:
        return np.bincount(self.labels, minlength=self.n_clusters).astype(np.int64)
