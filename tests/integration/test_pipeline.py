"""
Integration tests for the generation pipeline.

Runs complete configurations through generate -> balance -> single-path
and produces worksheet sets in parallel.
"""

import logging
import random

import pytest

from gridmaze import (
    ConfigurationError,
    ConnectivityError,
    GenerationResult,
    MazeAlgorithm,
    MazeConfig,
    UnsolvableMazeError,
    generate_maze,
    generate_worksheet_set,
    is_solvable,
    verify_perfect_maze,
)
from gridmaze.core.directions import Direction
from gridmaze.pipeline import WORKSHEET_TIERS, WorksheetTier, generate_solvable_maze


class TestGenerateMaze:
    """Test one configured generation end to end."""

    def test_keyword_configuration(self):
        result = generate_maze(algorithm="ellers", width=12, height=9, seed=3)

        assert isinstance(result, GenerationResult)
        assert result.algorithm is MazeAlgorithm.ELLERS
        assert (result.maze.width, result.maze.height) == (12, 9)
        assert result.is_perfect
        assert result.edges_removed == 0
        assert result.balance is None
        assert result.duration >= 0.0

    def test_config_object(self):
        config = MazeConfig(algorithm="braided", width=10, height=10, options={"braidness": 0.8}, seed=2)
        result = generate_maze(config)

        assert result.open_edges > 99
        assert sum(result.distribution.as_dict().values()) == pytest.approx(1.0)

    def test_seed_reproducibility(self):
        first = generate_maze(algorithm="sparse-loop", width=15, height=15, seed=99, single_path=True)
        second = generate_maze(algorithm="sparse-loop", width=15, height=15, seed=99, single_path=True)

        assert first.maze == second.maze

    def test_explicit_rng_overrides_seed(self):
        config = MazeConfig(algorithm="prims", width=10, height=10, seed=1)
        by_seed = generate_maze(config)
        by_rng = generate_maze(config, rng=random.Random(1))
        other = generate_maze(config, rng=random.Random(2))

        assert by_seed.maze == by_rng.maze
        assert by_seed.maze != other.maze

    @pytest.mark.parametrize("algorithm", ["braided", "sparse-loop", "multi-layer"])
    def test_single_path_makes_loop_algorithms_perfect(self, algorithm):
        result = generate_maze(algorithm=algorithm, width=8, height=8, seed=5, single_path=True)

        assert result.is_perfect
        assert verify_perfect_maze(result.maze)["is_perfect"]

    def test_single_path_skipped_for_perfect_algorithms(self):
        result = generate_maze(algorithm="kruskals", width=8, height=8, seed=5, single_path=True)
        assert result.edges_removed == 0
        assert result.is_perfect

    def test_balance_then_single_path(self):
        result = generate_maze(
            algorithm="sparse-loop",
            width=12,
            height=12,
            seed=8,
            balance={"dead_ends": 0.1, "three_way": 0.3, "straight": 0.6},
            single_path=True,
        )

        assert result.balance is not None
        assert result.balance.edges_after >= result.balance.edges_before
        assert result.is_perfect

    def test_balance_on_perfect_algorithm(self):
        result = generate_maze(
            algorithm="kruskals",
            width=12,
            height=12,
            seed=8,
            balance={"dead_ends": 0.1, "three_way": 0.3, "straight": 0.6},
        )

        assert result.balance.final.dead_ends < result.balance.initial.dead_ends
        assert result.open_edges == 143 + result.balance.walls_removed

    def test_single_path_keeps_portals_consistent(self):
        result = generate_maze(
            algorithm="multi-layer", width=5, height=5, options={"layers": 3, "portals": 10}, seed=2, single_path=True
        )

        assert result.is_perfect
        for portal in result.maze.portals:
            assert not result.maze.get_cell(*portal.source).has_wall(Direction.EAST)

    def test_balance_connectivity_error_propagates(self, monkeypatch):
        def disconnect(maze, target, **kwargs):
            raise ConnectivityError(1, maze.total_cells, stage="after balancing")

        monkeypatch.setattr("gridmaze.pipeline.balance_distribution", disconnect)

        with pytest.raises(ConnectivityError):
            generate_maze(
                algorithm="prims",
                width=6,
                height=6,
                seed=1,
                balance={"dead_ends": 0.1, "three_way": 0.3, "straight": 0.6},
            )

    def test_invalid_configuration(self):
        with pytest.raises(ConfigurationError):
            generate_maze(algorithm="braided", options={"braidness": 3})

    def test_config_and_kwargs_conflict(self):
        with pytest.raises(TypeError):
            generate_maze(MazeConfig(), width=5)

    def test_summary_logged(self, caplog):
        logger = logging.getLogger("gridmaze.test.pipeline")
        with caplog.at_level(logging.INFO, logger="gridmaze.test.pipeline"):
            generate_maze(algorithm="prims", width=6, height=6, seed=1, logger=logger)

        assert any("edges_removed" in record.message for record in caplog.records)


class TestWorksheet:
    """Test worksheet tier generation."""

    def test_tiers(self):
        assert [tier.name for tier in WORKSHEET_TIERS] == ["easy", "medium", "hard"]
        assert WORKSHEET_TIERS[0].algorithm is MazeAlgorithm.SIDEWINDER

    def test_worksheet_set(self):
        worksheet = generate_worksheet_set(seed=11)

        assert list(worksheet) == ["easy", "medium", "hard"]
        assert (worksheet["easy"].width, worksheet["easy"].height) == (15, 15)
        assert (worksheet["hard"].width, worksheet["hard"].height) == (50, 50)
        assert all(is_solvable(maze) for maze in worksheet.values())

    def test_worksheet_reproducible_across_workers(self):
        tiers = (
            WorksheetTier("a", MazeAlgorithm.WILSONS, 10, 10),
            WorksheetTier("b", MazeAlgorithm.HUNT_AND_KILL, 10, 10),
        )
        serial = generate_worksheet_set(seed=4, tiers=tiers, max_workers=1)
        parallel = generate_worksheet_set(seed=4, tiers=tiers, max_workers=2)

        assert serial == parallel

    @pytest.mark.parametrize("max_attempts", [0, -1, 1001, 2.5])
    def test_invalid_attempts(self, max_attempts):
        with pytest.raises(ConfigurationError):
            generate_worksheet_set(seed=1, max_attempts=max_attempts)

    def test_unsolvable_after_retries(self, monkeypatch):
        monkeypatch.setattr("gridmaze.pipeline.is_solvable", lambda maze: False)
        tier = WorksheetTier("easy", MazeAlgorithm.SIDEWINDER, 5, 5)

        with pytest.raises(UnsolvableMazeError) as exc_info:
            generate_solvable_maze(tier, random.Random(0), max_attempts=3)

        assert exc_info.value.attempts == 3
        assert exc_info.value.algorithm_name == "sidewinder"
