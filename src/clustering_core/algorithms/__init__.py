"""
Algorithm Core Library - clustering validation metrics and seed initialization.

This module provides core numerical routines with minimal dependencies,
separate from the iterative clustering drivers that consume them.
"""

from .base import ClusteringOutput, ClusteringResult, counts_from_assignments
from .distances import CosineDist, Euclidean, PreMetric, SqEuclidean, get_metric
from .errors import (
    ClusteringError,
    DimensionMismatch,
    InvalidLabelError,
    InvalidSeedCountError,
    UnknownAlgorithmError,
)
from .seeding import (
    KmCentralityAlg,
    KmppAlg,
    RandSeedAlg,
    SeedingAlgorithm,
    copyseeds,
    initseeds,
    initseeds_by_costs,
    kmpp,
    kmpp_by_costs,
    seeding_algorithm,
)
from .silhouette import (
    sil_aggregate_dists,
    silhouette_score,
    silhouettes,
    silhouettes_from_result,
)
from .varinfo import entropy, pairwise_varinfo, varinfo, varinfo_result, varinfo_results

__all__ = [
    # Clustering results
    "ClusteringOutput",
    "ClusteringResult",
    "counts_from_assignments",
    # Distances
    "PreMetric",
    "SqEuclidean",
    "Euclidean",
    "CosineDist",
    "get_metric",
    # Errors
    "ClusteringError",
    "DimensionMismatch",
    "InvalidLabelError",
    "InvalidSeedCountError",
    "UnknownAlgorithmError",
    # Seeding
    "SeedingAlgorithm",
    "RandSeedAlg",
    "KmppAlg",
    "KmCentralityAlg",
    "seeding_algorithm",
    "initseeds",
    "initseeds_by_costs",
    "kmpp",
    "kmpp_by_costs",
    "copyseeds",
    # Silhouette
    "sil_aggregate_dists",
    "silhouettes",
    "silhouettes_from_result",
    "silhouette_score",
    # Variation of information
    "entropy",
    "varinfo",
    "varinfo_result",
    "varinfo_results",
    "pairwise_varinfo",
]
