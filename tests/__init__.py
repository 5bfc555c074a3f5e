"""
Test suite for clustering-core.

This package contains all tests organized by component:
- test_algorithms/: Tests for metrics, distances and seeding
- test_utils/: Tests for logging and random-source helpers
"""
