"""
Pytest configuration and shared fixtures for the gridmaze test suite.

This module provides common fixtures, test configuration, and utilities
used across the entire test suite.
"""

import random
import shutil
import tempfile
from pathlib import Path

import pytest

from gridmaze.algorithms import generate_recursive_backtracker, generate_sparse_loop
from gridmaze.core.directions import Direction
from gridmaze.core.maze import create_maze
from gridmaze.utils.logging import configure_logging

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        # Mark slow tests based on name patterns
        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Random Source Fixtures
# =============================================================================


@pytest.fixture
def rng():
    """Seeded random source for reproducible tests."""
    return random.Random(42)


@pytest.fixture(params=[1, 7, 42, 2024])
def seed(request):
    """Parametrized seed for properties that must hold for every seed."""
    return request.param


# =============================================================================
# Maze Fixtures
# =============================================================================


@pytest.fixture
def walled_maze():
    """Fully walled 4x3 maze, nothing carved."""
    return create_maze(4, 3)


@pytest.fixture
def corridor_maze():
    """2x2 maze carved into a U shape: (0,0)-(1,0)-(1,1)-(0,1)."""
    maze = create_maze(2, 2)
    maze.carve(0, 0, Direction.EAST)
    maze.carve(1, 0, Direction.SOUTH)
    maze.carve(1, 1, Direction.WEST)
    return maze


@pytest.fixture
def perfect_maze():
    """Small perfect maze from the recursive backtracker."""
    return generate_recursive_backtracker(8, 8, rng=42)


@pytest.fixture
def looped_maze():
    """Small maze with loops from the sparse loop algorithm."""
    return generate_sparse_loop(8, 8, {"loop_fraction": 0.3}, rng=42)


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture
def restore_logging():
    """Put the global logging configuration back after a test changes it."""
    yield
    configure_logging(level="WARNING", use_colors=True)


# =============================================================================
# File System Fixtures
# =============================================================================


@pytest.fixture
def temp_directory():
    """Temporary directory for file operations."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)
