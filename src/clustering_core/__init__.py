"""
Clustering Core - validation metrics and seeding for partitional clustering.

This package provides:
- Variation of information between two clusterings
- Per-point silhouette scores from a precomputed distance matrix
- Seed initialization (random, k-means++, k-medoids centrality)
"""

__version__ = "0.1.0"

from .algorithms import (
    ClusteringOutput,
    ClusteringResult,
    copyseeds,
    initseeds,
    initseeds_by_costs,
    kmpp,
    kmpp_by_costs,
    seeding_algorithm,
    silhouettes,
    silhouettes_from_result,
    varinfo,
    varinfo_result,
    varinfo_results,
)

# Explicitly import subpackages to ensure they're discoverable
from . import algorithms
from . import utils

__all__ = [
    "ClusteringOutput",
    "ClusteringResult",
    "copyseeds",
    "initseeds",
    "initseeds_by_costs",
    "kmpp",
    "kmpp_by_costs",
    "seeding_algorithm",
    "silhouettes",
    "silhouettes_from_result",
    "varinfo",
    "varinfo_result",
    "varinfo_results",
    "algorithms",
    "utils",
]
