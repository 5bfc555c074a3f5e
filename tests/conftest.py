"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test modules: small synthetic datasets whose cluster
structure is known in advance.
"""

import numpy as np
import pytest


def generate_clustered_data(
    seed: int = 0,
    n_clusters: int = 3,
    n_features: int = 2,
    n_samples_per_cluster: int = 20,
    std: float = 0.4,
):
    """
    Tight blobs around fixed, well-separated means.

    Returns:
        Tuple of (X, labels) with X of shape
        (n_clusters * n_samples_per_cluster, n_features)
    """
    rng = np.random.default_rng(seed)
    offset = 10  # means don't have to be centered at the origin
    means = np.array(
        [
            [1, 1, 1, 0],
            [-1, -1, 0, 1],
            [1, -1, 1, 1],
            [-1, 1, 1, 0],
        ],
        dtype=np.float64,
    ) * 5 + offset

    noise = rng.standard_normal((n_samples_per_cluster, n_features))
    X = np.vstack([means[i, :n_features] + std * noise for i in range(n_clusters)])
    labels = np.repeat(np.arange(n_clusters), n_samples_per_cluster)
    return X, labels


def generate_data_blobs(
    n_samples: int = 100,
    n_features: int = 5,
    n_centers: int = 5,
    cluster_std: float = 1.0,
    center_box=(-10.0, 10.0),
    shuffle: bool = True,
    seed: int = 0,
):
    """
    Gaussian blobs with random centers, sizes as even as possible.

    Returns:
        Tuple of (X, labels, centers)
    """
    rng = np.random.default_rng(seed)
    centers = rng.uniform(center_box[0], center_box[1], size=(n_centers, n_features))
    sizes = np.full(n_centers, n_samples // n_centers)
    sizes[: n_samples % n_centers] += 1

    X = np.vstack(
        [centers[i] + cluster_std * rng.standard_normal((sizes[i], n_features))
         for i in range(n_centers)]
    )
    labels = np.repeat(np.arange(n_centers), sizes)
    if shuffle:
        perm = rng.permutation(n_samples)
        X, labels = X[perm], labels[perm]
    return X, labels, centers


@pytest.fixture
def clustered_data():
    """Three tight, well-separated 2-D clusters of 20 points each."""
    return generate_clustered_data()


@pytest.fixture
def blobs():
    """100 samples in 5 shuffled Gaussian blobs."""
    return generate_data_blobs()


@pytest.fixture
def sq_dists(clustered_data):
    """Squared Euclidean distance matrix of ``clustered_data``."""
    X, _ = clustered_data
    diffs = X[:, None, :] - X[None, :, :]
    return np.sum(diffs ** 2, axis=2)


@pytest.fixture
def tight_clusters():
    """Three 2-D clusters whose spread is negligible next to their separation."""
    return generate_clustered_data(std=0.01)
