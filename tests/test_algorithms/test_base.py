"""
Tests for the clustering result abstraction.
"""

import numpy as np
import pytest

from clustering_core.algorithms.base import (
    ClusteringOutput,
    ClusteringResult,
    counts_from_assignments,
)
from clustering_core.algorithms.errors import InvalidLabelError
from clustering_core.algorithms.silhouette import silhouettes_from_result
from clustering_core.algorithms.varinfo import varinfo_results


def test_clustering_result_defaults():
    """Cluster count is inferred from the labels."""
    result = ClusteringResult(labels=[0, 2, 2, 1])
    assert result.nclusters() == 3
    np.testing.assert_array_equal(result.assignments(), [0, 2, 2, 1])
    np.testing.assert_array_equal(result.counts(), [1, 1, 2])
    assert result.objective == 0.0
    assert result.n_iter == 0
    assert result.metadata == {}


def test_clustering_result_empty_cluster():
    """An explicit cluster count may leave clusters empty."""
    result = ClusteringResult(labels=np.array([0, 0, 2]), n_clusters=4)
    np.testing.assert_array_equal(result.counts(), [2, 0, 1, 0])
    assert result.counts().sum() == len(result.assignments())


def test_clustering_result_validation():
    """Labels must fit the declared cluster count."""
    with pytest.raises(InvalidLabelError):
        ClusteringResult(labels=[0, 3], n_clusters=2)
    with pytest.raises(InvalidLabelError):
        ClusteringResult(labels=[-1, 0])
    with pytest.raises(ValueError, match="n_clusters must be >= 1"):
        ClusteringResult(labels=[], n_clusters=0)


def test_clustering_result_satisfies_protocol():
    assert isinstance(ClusteringResult(labels=[0, 1]), ClusteringOutput)


def test_duck_typed_result_is_accepted():
    """Any object with the three accessors works with the metrics."""

    class KmedoidsOutput:
        def __init__(self, labels, k):
            self._labels = np.asarray(labels)
            self._k = k

        def nclusters(self):
            return self._k

        def assignments(self):
            return self._labels

        def counts(self):
            return np.bincount(self._labels, minlength=self._k)

    r = KmedoidsOutput([0, 0, 1, 1], 2)
    assert isinstance(r, ClusteringOutput)
    assert varinfo_results(r, ClusteringResult(labels=[1, 1, 0, 0])) == pytest.approx(0.0, abs=1e-12)

    dists = np.where(np.eye(4, dtype=bool), 0.0, 1.0)
    assert silhouettes_from_result(r, dists).shape == (4,)


def test_counts_from_assignments():
    np.testing.assert_array_equal(counts_from_assignments([1, 1, 0, 3], 4), [1, 2, 0, 1])
    with pytest.raises(InvalidLabelError):
        counts_from_assignments([0, 4], 4)
