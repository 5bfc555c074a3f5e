"""
Variation of information between two clusterings.

VI(A, B) = H(A) + H(B) - 2 I(A, B), an information-theoretic distance
between partitions of the same dataset. It is zero exactly when the two
partitions agree up to relabeling.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .base import ClusteringOutput, Labels, check_labels
from .errors import DimensionMismatch
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


def entropy(p) -> float:
    """
    Shannon entropy (natural log) of a probability vector.

    Zero entries contribute nothing, so ``log(0)`` is never evaluated.
    """
    p = np.asarray(p, dtype=np.float64).ravel()
    nz = p[p > 0.0]
    return float(-np.sum(nz * np.log(nz)))


def varinfo(k1: int, a1: Labels, k2: int, a2: Labels) -> float:
    """
    Compute the variation of information between two assignments.

    Args:
        k1: Number of clusters in the first clustering
        a1: Labels of the first clustering, values in [0, k1)
        k2: Number of clusters in the second clustering
        a2: Labels of the second clustering, values in [0, k2)

    Returns:
        VI in nats, always >= 0

    Raises:
        DimensionMismatch: If ``a1`` and ``a2`` differ in length
        InvalidLabelError: If a label is outside its cluster range
    """
    a1 = np.asarray(a1, dtype=np.int64).ravel()
    a2 = np.asarray(a2, dtype=np.int64).ravel()
    n = len(a1)
    if len(a2) != n:
        raise DimensionMismatch(
            f"Inconsistent array length: {n} vs {len(a2)}"
        )
    check_labels(a1, k1, name="a1")
    check_labels(a2, k2, name="a2")
    if n == 0:
        return 0.0

    # Single pass over the pair code i * k2 + j gives the joint counts;
    # marginals are its row and column sums.
    P = np.bincount(a1 * k2 + a2, minlength=k1 * k2).reshape(k1, k2) / n
    p1 = P.sum(axis=1)
    p2 = P.sum(axis=0)

    H1 = entropy(p1)
    H2 = entropy(p2)

    rows, cols = np.nonzero(P)
    pij = P[rows, cols]
    I = float(np.sum(pij * np.log(pij / (p1[rows] * p2[cols]))))

    vi = H1 + H2 - 2.0 * I
    return max(vi, 0.0)


def varinfo_result(result: ClusteringOutput, k0: int, a0: Labels) -> float:
    """
    Variation of information between a clustering result and explicit labels.

    Args:
        result: Any object exposing ``nclusters()`` and ``assignments()``
        k0: Number of clusters in the other clustering
        a0: Labels of the other clustering
    """
    return varinfo(result.nclusters(), result.assignments(), k0, a0)


def varinfo_results(r1: ClusteringOutput, r2: ClusteringOutput) -> float:
    """Variation of information between two clustering results."""
    return varinfo(r1.nclusters(), r1.assignments(), r2.nclusters(), r2.assignments())


def pairwise_varinfo(results: Sequence[ClusteringOutput]) -> List[float]:
    """
    Compute VI between all pairs of clustering results.

    Args:
        results: Clustering results over the same dataset (e.g. restarts)

    Returns:
        List of VI values for all pairs (i, j) where i < j
    """
    vis = []
    for i in range(len(results)):
        for j in range(i + 1, len(results)):
            vis.append(varinfo_results(results[i], results[j]))
    logger.debug("Computed %d pairwise VI values over %d results", len(vis), len(results))
    return vis
