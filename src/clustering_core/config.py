"""
Configuration management for clustering-core.

Loads configuration from environment variables (typically from a .env file).
Uses python-dotenv to load .env automatically.

Usage:
    from clustering_core.config import config

    # Default seeding algorithm and metric
    alg = config.seeding.algorithm
    metric = config.seeding.metric

    # Logging defaults
    level = config.logging.level
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Look for .env in project root (parent of src/)
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

SEEDING_ALGORITHMS = ("rand", "kmpp", "kmcen")
DISTANCE_METRICS = ("sqeuclidean", "euclidean", "cosine")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    """Parse an optional integer seed from an environment string."""
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(
            f"CLUSTERING_RANDOM_SEED must be an integer, got {raw!r}"
        ) from e


@dataclass
class SeedingConfig:
    """Defaults for seed initialization."""
    algorithm: str = "kmpp"
    metric: str = "sqeuclidean"
    random_seed: Optional[int] = None

    def __post_init__(self):
        """Validate algorithm and metric names."""
        self.algorithm = self.algorithm.lower()
        self.metric = self.metric.lower()
        if self.algorithm not in SEEDING_ALGORITHMS:
            raise ValueError(
                f"Unknown seeding algorithm '{self.algorithm}'. "
                f"Expected one of {', '.join(SEEDING_ALGORITHMS)}."
            )
        if self.metric not in DISTANCE_METRICS:
            raise ValueError(
                f"Unknown distance metric '{self.metric}'. "
                f"Expected one of {', '.join(DISTANCE_METRICS)}."
            )


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Fall back to WARNING for unrecognized levels."""
        self.level = self.level.upper()
        if self.level not in LOG_LEVELS:
            self.level = "WARNING"
        if not self.log_file:
            self.log_file = None


class Config:
    """
    Application configuration loaded from environment variables.

    Environment variables can be set:
    1. In a .env file in the project root
    2. In the system environment
    3. In a container/deployment environment
    """

    def __init__(self):
        """Load configuration from environment."""
        self.seeding = SeedingConfig(
            algorithm=os.getenv("CLUSTERING_SEED_ALGORITHM", "kmpp"),
            metric=os.getenv("CLUSTERING_DISTANCE_METRIC", "sqeuclidean"),
            random_seed=_parse_seed(os.getenv("CLUSTERING_RANDOM_SEED")),
        )
        self.logging = LoggingConfig(
            level=os.getenv("CLUSTERING_LOG_LEVEL", "WARNING"),
            log_file=os.getenv("CLUSTERING_LOG_FILE"),
        )


# Global config instance
config = Config()
