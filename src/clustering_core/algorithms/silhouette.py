"""
Silhouette scores from a precomputed distance matrix.

For point j with own cluster l:
    a[j] = mean distance to the other members of l
    b[j] = smallest mean distance to the members of any other cluster
    s[j] = (b[j] - a[j]) / max(a[j], b[j])
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .base import ClusteringOutput, Labels, check_labels
from .errors import DimensionMismatch
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


def sil_aggregate_dists(k: int, assignments: Labels, dists) -> np.ndarray:
    """
    Sum distances from every cluster to every point, excluding self-pairs.

    Args:
        k: Number of clusters
        assignments: Labels of shape (n,), values in [0, k)
        dists: (n, n) distance matrix; the diagonal is never read

    Returns:
        (k, n) array ``r`` where ``r[i, j]`` is the sum of ``dists[p, j]``
        over all points ``p != j`` assigned to cluster ``i``

    Raises:
        InvalidLabelError: If a label is outside [0, k)
    """
    a = np.asarray(assignments, dtype=np.int64).ravel()
    dists = np.asarray(dists, dtype=np.float64)
    n = len(a)
    check_labels(a, k)

    r = np.zeros((k, n), dtype=np.float64)
    for j in range(n):
        # Two disjoint ranges skip p == j without touching dists[j, j]
        r[:, j] = np.bincount(a[:j], weights=dists[:j, j], minlength=k)
        r[:, j] += np.bincount(a[j + 1:], weights=dists[j + 1:, j], minlength=k)
    return r


def silhouettes(
    assignments: Labels,
    counts,
    dists,
    *,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Compute the silhouette of every point.

    Args:
        assignments: Cluster labels of shape (n,), values in [0, k)
        counts: Number of points in each cluster, length k
        dists: (n, n) pairwise distance matrix
        out: Optional preallocated (n,) float array to write scores into

    Returns:
        (n,) array of scores in [-1, 1]. Points whose intra- and nearest
        inter-cluster averages are both zero, and points of a clustering
        with a single cluster, score 0.0.

    Raises:
        DimensionMismatch: If ``dists`` is not (n, n), ``out`` is not (n,)
            or ``counts`` disagrees with the label histogram
        InvalidLabelError: If a label is outside [0, k)
    """
    a_vec = np.asarray(assignments, dtype=np.int64).ravel()
    counts = np.asarray(counts, dtype=np.float64).ravel()
    dists = np.asarray(dists, dtype=np.float64)
    n = len(a_vec)
    k = len(counts)

    if dists.shape != (n, n):
        raise DimensionMismatch(
            f"Inconsistent array dimensions: dists has shape {dists.shape}, "
            f"expected ({n}, {n})"
        )
    if out is not None and out.shape != (n,):
        raise DimensionMismatch(f"out must have shape ({n},), got {out.shape}")

    check_labels(a_vec, k)
    if not np.array_equal(np.bincount(a_vec, minlength=k), counts):
        raise DimensionMismatch(
            "Inconsistent cluster sizes: counts do not match the assignments"
        )

    r = sil_aggregate_dists(k, a_vec, dists)

    # From sums to averages; a point is not counted in its own cluster
    cols = np.arange(n)
    denom = np.broadcast_to(counts[:, None], (k, n)).copy()
    denom[a_vec, cols] -= 1.0
    empty = denom == 0
    r = np.divide(r, denom, out=np.zeros_like(r), where=~empty)

    a = r[a_vec, cols]
    if k > 1:
        others = r.copy()
        others[a_vec, cols] = np.inf
        b = others.min(axis=0)
    else:
        b = np.full(n, np.inf)

    sil = np.zeros(n, dtype=np.float64) if out is None else out
    m = np.maximum(a, b)
    defined = np.isfinite(b) & (m > 0)
    sil[:] = 0.0
    sil[defined] = (b[defined] - a[defined]) / m[defined]

    n_undefined = int(n - defined.sum())
    if n_undefined:
        logger.debug("Assigned silhouette 0.0 to %d degenerate point(s)", n_undefined)
    return sil


def silhouettes_from_result(
    result: ClusteringOutput, dists, *, out: Optional[np.ndarray] = None
) -> np.ndarray:
    """Silhouettes for a clustering result and its (n, n) distance matrix."""
    return silhouettes(result.assignments(), result.counts(), dists, out=out)


def silhouette_score(assignments: Labels, counts, dists) -> float:
    """
    Mean silhouette over all points.

    Higher is better (range [-1, 1]); 0.0 for an empty input.
    """
    sil = silhouettes(assignments, counts, dists)
    if sil.size == 0:
        return 0.0
    return float(np.mean(sil))
