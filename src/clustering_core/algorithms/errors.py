"""
Exception hierarchy for the clustering core.

Every error here signals a violated caller contract and derives from
``ValueError``, so existing ``except ValueError`` handlers keep working.
"""


class ClusteringError(ValueError):
    """Base exception for all clustering-core argument errors."""


class DimensionMismatch(ClusteringError):
    """Array or matrix shapes are inconsistent with each other."""


class InvalidLabelError(ClusteringError):
    """A cluster label lies outside ``[0, k)``."""


class InvalidSeedCountError(ClusteringError):
    """The requested number of seeds is not in ``[1, n]``."""


class UnknownAlgorithmError(ClusteringError):
    """A seeding algorithm or metric was requested by an unknown name."""
