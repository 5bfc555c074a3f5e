"""
Seed initialization for iterative clustering methods.

Each algorithm is a ``SeedingAlgorithm`` subclass supporting two entry
points:

    alg.initseeds(X, k)               # X: (n, d) samples, one per row
    alg.initseeds_by_costs(costs, k)  # costs: (n, n) pairwise cost matrix

Both return ``k`` row indices into the data (an int64 array). Algorithms are
also available by name: ``"rand"``, ``"kmpp"`` (k-means++) and ``"kmcen"``
(k-medoids centrality).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union

import numpy as np

from .distances import PreMetric, get_metric
from .errors import DimensionMismatch, InvalidSeedCountError, UnknownAlgorithmError
from ..config import config
from ..utils.logging_config import get_logger
from ..utils.random_state import RandomState, check_random_state

logger = get_logger(__name__)

Array2D = np.ndarray
MetricLike = Optional[Union[str, PreMetric]]


def check_seeding_args(n: int, k: int) -> None:
    """Raise ``InvalidSeedCountError`` unless ``1 <= k <= n``."""
    if k < 1:
        raise InvalidSeedCountError(f"The number of seeds must be positive, got {k}")
    if k > n:
        raise InvalidSeedCountError(
            f"Attempted to select more seeds ({k}) than samples ({n})"
        )


def _as_samples(X) -> Array2D:
    X = np.asarray(X, dtype=np.float64)
    if X.ndim != 2:
        raise DimensionMismatch(f"X must be (n_samples, n_features), got shape {X.shape}")
    return X


def _as_costs(costs) -> Array2D:
    costs = np.asarray(costs, dtype=np.float64)
    if costs.ndim != 2 or costs.shape[0] != costs.shape[1]:
        raise DimensionMismatch(f"Cost matrix must be square, got shape {costs.shape}")
    return costs


def _seed_buffer(out: Optional[np.ndarray], k: int) -> np.ndarray:
    if out is None:
        return np.empty(k, dtype=np.int64)
    if out.shape != (k,):
        raise DimensionMismatch(f"Seed buffer must have shape ({k},), got {out.shape}")
    return out


def _weighted_pick(
    weights: np.ndarray, chosen: np.ndarray, rng: np.random.Generator
) -> int:
    """Draw an index with probability proportional to *weights*."""
    n = len(weights)
    total = weights.sum()
    if np.isinf(total):
        # Infinitely distant points dominate every finite weight
        far = np.flatnonzero(np.isinf(weights))
        if len(far) == 0:
            weights = weights / weights.max()
            return int(rng.choice(n, p=weights / weights.sum()))
        return int(rng.choice(far))
    if total <= 0.0:
        # Every remaining point coincides with a seed; stay duplicate-free
        remaining = np.flatnonzero(~chosen)
        logger.debug(
            "All k-means++ weights are zero; drawing uniformly from %d remaining",
            len(remaining),
        )
        return int(rng.choice(remaining))
    return int(rng.choice(n, p=weights / total))


class SeedingAlgorithm(ABC):
    """
    Base class for seeding algorithms.

    Subclasses implement ``_init_from_features`` and ``_init_from_costs``;
    argument validation and random-source resolution happen here, before
    any selection work.
    """

    name: str = ""

    def initseeds(
        self,
        X,
        k: int,
        *,
        metric: MetricLike = None,
        random_state: RandomState = None,
        out: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """
        Select ``k`` seeds from the rows of a sample matrix.

        Args:
            X: (n, d) samples, one per row
            k: Number of seeds
            metric: Pre-metric or metric name; defaults to
                ``config.seeding.metric``
            random_state: None, int seed or numpy Generator
            out: Optional (k,) integer buffer to write the indices into

        Returns:
            (k,) array of row indices

        Raises:
            InvalidSeedCountError: If k is not in [1, n]
            DimensionMismatch: If X is not 2-D or ``out`` has the wrong shape
        """
        X = _as_samples(X)
        check_seeding_args(X.shape[0], k)
        iseeds = _seed_buffer(out, k)
        metric = get_metric(metric if metric is not None else config.seeding.metric)
        rng = check_random_state(random_state)
        self._init_from_features(iseeds, X, metric, rng)
        logger.debug("%s selected %d seeds from %d samples", self.name, k, X.shape[0])
        return iseeds

    def initseeds_by_costs(
        self,
        costs,
        k: int,
        *,
        random_state: RandomState = None,
        out: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """
        Select ``k`` seeds given a precomputed cost matrix.

        Args:
            costs: (n, n) matrix, ``costs[i, j]`` the cost of placing
                samples i and j in the same cluster
            k: Number of seeds
            random_state: None, int seed or numpy Generator
            out: Optional (k,) integer buffer to write the indices into

        Returns:
            (k,) array of indices

        Raises:
            InvalidSeedCountError: If k is not in [1, n]
            DimensionMismatch: If costs is not square or ``out`` has the
                wrong shape
        """
        costs = _as_costs(costs)
        check_seeding_args(costs.shape[0], k)
        iseeds = _seed_buffer(out, k)
        rng = check_random_state(random_state)
        self._init_from_costs(iseeds, costs, rng)
        logger.debug(
            "%s selected %d seeds from a %dx%d cost matrix",
            self.name, k, costs.shape[0], costs.shape[1],
        )
        return iseeds

    @abstractmethod
    def _init_from_features(
        self, iseeds: np.ndarray, X: Array2D, metric: PreMetric, rng: np.random.Generator
    ) -> None:
        """Fill *iseeds* from the sample matrix."""

    @abstractmethod
    def _init_from_costs(
        self, iseeds: np.ndarray, costs: Array2D, rng: np.random.Generator
    ) -> None:
        """Fill *iseeds* from the cost matrix."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RandSeedAlg(SeedingAlgorithm):
    """Choose an arbitrary subset of distinct samples as seeds."""

    name = "rand"

    def _init_from_features(self, iseeds, X, metric, rng):
        iseeds[:] = rng.choice(X.shape[0], size=len(iseeds), replace=False)

    def _init_from_costs(self, iseeds, costs, rng):
        iseeds[:] = rng.choice(costs.shape[0], size=len(iseeds), replace=False)


class KmppAlg(SeedingAlgorithm):
    """
    K-means++ seeding.

    D. Arthur and S. Vassilvitskii (2007).
    k-means++: the advantages of careful seeding.
    18th Annual ACM-SIAM Symposium on Discrete Algorithms.

    The first seed is uniform; each later seed is drawn with probability
    proportional to its cost to the nearest seed chosen so far.
    """

    name = "kmpp"

    def _init_from_features(self, iseeds, X, metric, rng):
        n = X.shape[0]
        k = len(iseeds)
        chosen = np.zeros(n, dtype=bool)

        p = int(rng.integers(0, n))
        iseeds[0] = p
        chosen[p] = True
        if k == 1:
            return

        mincosts = metric.colwise(X, X[p])
        mincosts[p] = 0.0
        for j in range(1, k):
            p = _weighted_pick(mincosts, chosen, rng)
            iseeds[j] = p
            chosen[p] = True
            np.minimum(mincosts, metric.colwise(X, X[p]), out=mincosts)
            mincosts[p] = 0.0

    def _init_from_costs(self, iseeds, costs, rng):
        n = costs.shape[0]
        k = len(iseeds)
        chosen = np.zeros(n, dtype=bool)

        p = int(rng.integers(0, n))
        iseeds[0] = p
        chosen[p] = True
        if k == 1:
            return

        mincosts = costs[:, p].copy()
        mincosts[p] = 0.0
        for j in range(1, k):
            p = _weighted_pick(mincosts, chosen, rng)
            iseeds[j] = p
            chosen[p] = True
            np.minimum(mincosts, costs[:, p], out=mincosts)
            mincosts[p] = 0.0


class KmCentralityAlg(SeedingAlgorithm):
    """
    K-medoids initialization based on centrality.

    Hae-Sang Park and Chi-Hyuck Jun.
    A simple and fast algorithm for K-medoids clustering.
    doi:10.1016/j.eswa.2008.01.039

    Deterministic: the random source is accepted for interface uniformity
    and never consumed.
    """

    name = "kmcen"

    def _init_from_features(self, iseeds, X, metric, rng):
        self._init_from_costs(iseeds, metric.pairwise(X), rng)

    def _init_from_costs(self, iseeds, costs, rng):
        row_totals = costs.sum(axis=1)
        if np.any(row_totals == 0.0):
            logger.warning(
                "Cost matrix has %d all-zero row(s); centrality scores may be non-finite",
                int(np.sum(row_totals == 0.0)),
            )
        with np.errstate(divide="ignore", invalid="ignore"):
            coefs = 1.0 / row_totals
            # scores[j] = sum_i costs[i, j] / sum_j' costs[i, j']
            scores = costs.T @ coefs

        # lower score indicates a more central point
        iseeds[:] = np.argsort(scores, kind="stable")[: len(iseeds)]


_ALGORITHMS = {
    "rand": RandSeedAlg,
    "kmpp": KmppAlg,
    "kmcen": KmCentralityAlg,
}

SeedSpec = Optional[Union[str, SeedingAlgorithm, Sequence[int], np.ndarray]]


def seeding_algorithm(name: str) -> SeedingAlgorithm:
    """
    Look up a seeding algorithm by name.

    Args:
        name: ``"rand"``, ``"kmpp"`` or ``"kmcen"`` (case-insensitive)

    Raises:
        UnknownAlgorithmError: If the name is not recognized
    """
    key = str(name).lower()
    if key not in _ALGORITHMS:
        raise UnknownAlgorithmError(
            f"Unknown seeding algorithm '{name}'. "
            f"Expected one of {', '.join(_ALGORITHMS)}."
        )
    return _ALGORITHMS[key]()


def _explicit_seeds(seeds, n: int, k: int) -> np.ndarray:
    """Validate caller-provided seed indices."""
    check_seeding_args(n, k)
    iseeds = np.asarray(seeds, dtype=np.int64).ravel()
    if len(iseeds) != k:
        raise InvalidSeedCountError(f"Expected {k} seed indices, got {len(iseeds)}")
    if iseeds.min() < 0 or iseeds.max() >= n:
        raise InvalidSeedCountError(f"Seed indices must lie in [0, {n})")
    return iseeds


def _resolve(alg: SeedSpec) -> Optional[SeedingAlgorithm]:
    if alg is None:
        return seeding_algorithm(config.seeding.algorithm)
    if isinstance(alg, SeedingAlgorithm):
        return alg
    if isinstance(alg, str):
        return seeding_algorithm(alg)
    return None


def initseeds(
    alg: SeedSpec,
    X,
    k: int,
    *,
    metric: MetricLike = None,
    random_state: RandomState = None,
) -> np.ndarray:
    """
    Select ``k`` seeds from the rows of ``X``.

    Args:
        alg: Algorithm name, ``SeedingAlgorithm`` instance, explicit seed
            indices (validated and returned), or None for
            ``config.seeding.algorithm``
        X: (n, d) samples, one per row
        k: Number of seeds
        metric: Pre-metric or metric name used by the algorithm
        random_state: None, int seed or numpy Generator

    Returns:
        (k,) array of row indices
    """
    algorithm = _resolve(alg)
    if algorithm is None:
        return _explicit_seeds(alg, _as_samples(X).shape[0], k)
    return algorithm.initseeds(X, k, metric=metric, random_state=random_state)


def initseeds_by_costs(
    alg: SeedSpec,
    costs,
    k: int,
    *,
    random_state: RandomState = None,
) -> np.ndarray:
    """
    Select ``k`` seeds given an (n, n) cost matrix.

    Args:
        alg: Algorithm name, ``SeedingAlgorithm`` instance, explicit seed
            indices, or None for ``config.seeding.algorithm``
        costs: (n, n) pairwise cost matrix
        k: Number of seeds
        random_state: None, int seed or numpy Generator

    Returns:
        (k,) array of indices
    """
    algorithm = _resolve(alg)
    if algorithm is None:
        return _explicit_seeds(alg, _as_costs(costs).shape[0], k)
    return algorithm.initseeds_by_costs(costs, k, random_state=random_state)


def kmpp(X, k: int, *, metric: MetricLike = None, random_state: RandomState = None) -> np.ndarray:
    """K-means++ seeds from the rows of ``X``."""
    return KmppAlg().initseeds(X, k, metric=metric, random_state=random_state)


def kmpp_by_costs(costs, k: int, *, random_state: RandomState = None) -> np.ndarray:
    """K-means++ seeds from a precomputed cost matrix."""
    return KmppAlg().initseeds_by_costs(costs, k, random_state=random_state)


def copyseeds(X, iseeds, *, out: Optional[np.ndarray] = None) -> Array2D:
    """
    Materialize seed rows as initial centers.

    Args:
        X: (n, d) samples, one per row
        iseeds: k row indices
        out: Optional (k, d) buffer to copy the rows into

    Returns:
        (k, d) array of centers

    Raises:
        DimensionMismatch: If ``out`` is not (k, d)
        InvalidSeedCountError: If an index is outside [0, n)
    """
    X = np.asarray(X)
    if X.ndim != 2:
        raise DimensionMismatch(f"X must be (n_samples, n_features), got shape {X.shape}")
    iseeds = np.asarray(iseeds, dtype=np.int64).ravel()
    if iseeds.size and (iseeds.min() < 0 or iseeds.max() >= X.shape[0]):
        raise InvalidSeedCountError(f"Seed indices must lie in [0, {X.shape[0]})")
    shape = (len(iseeds), X.shape[1])
    if out is None:
        out = np.empty(shape, dtype=X.dtype)
    elif out.shape != shape:
        raise DimensionMismatch(
            f"Inconsistent array dimensions: out has shape {out.shape}, expected {shape}"
        )
    out[:] = X[iseeds]
    return out
