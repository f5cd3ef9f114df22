"""
Unit tests for the maze data model.

Tests Cell wall bookkeeping, symmetric carving, boundary handling,
validation and dict serialization of Maze.
"""

import pytest

from gridmaze.core.directions import DIRECTIONS, Direction, Position
from gridmaze.core.maze import Cell, Maze, Portal, create_maze
from gridmaze.utils.exceptions import ConfigurationError, StructuralError


class TestDirection:
    """Test direction offsets and opposites."""

    @pytest.mark.parametrize(
        ("direction", "offset"),
        [
            (Direction.NORTH, (0, -1)),
            (Direction.EAST, (1, 0)),
            (Direction.SOUTH, (0, 1)),
            (Direction.WEST, (-1, 0)),
        ],
    )
    def test_offsets(self, direction, offset):
        """North points to decreasing y."""
        assert (direction.dx, direction.dy) == offset

    def test_opposites_are_involutions(self):
        for direction in DIRECTIONS:
            assert direction.opposite.opposite is direction
            assert direction.opposite is not direction

    def test_from_letter(self):
        assert Direction.from_letter("n") is Direction.NORTH
        assert Direction.from_letter("W") is Direction.WEST

    def test_position_step(self):
        assert Position(2, 2).step(Direction.NORTH) == Position(2, 1)
        assert Position(2, 2).step(Direction.EAST) == Position(3, 2)


class TestCell:
    """Test single cell wall flags."""

    def test_new_cell_is_fully_walled(self):
        cell = Cell()
        assert cell.wall_count == 4
        assert cell.walls == frozenset(DIRECTIONS)
        assert cell.open_sides() == []

    def test_remove_and_add_wall(self):
        cell = Cell()
        cell.remove_wall(Direction.EAST)
        assert not cell.has_wall(Direction.EAST)
        assert cell.open_sides() == [Direction.EAST]
        cell.add_wall(Direction.EAST)
        assert cell.wall_count == 4

    def test_copy_is_independent(self):
        cell = Cell()
        duplicate = cell.copy()
        duplicate.remove_wall(Direction.NORTH)
        assert cell.has_wall(Direction.NORTH)

    def test_dict_round_trip(self):
        cell = Cell(north=False, east=True, south=False, west=True)
        assert cell.to_dict() == {"walls": ["E", "W"]}
        assert Cell.from_dict(cell.to_dict()) == cell


class TestMazeConstruction:
    """Test maze creation and defaults."""

    def test_defaults(self):
        maze = create_maze(5, 3)
        assert maze.width == 5
        assert maze.height == 3
        assert maze.total_cells == 15
        assert maze.start == Position(0, 0)
        assert maze.finish == Position(4, 2)
        assert maze.portals == []
        assert maze.layers is None

    def test_every_cell_starts_walled(self, walled_maze):
        assert all(cell.wall_count == 4 for _, cell in walled_maze.cells())

    @pytest.mark.parametrize(("width", "height"), [(1, 5), (5, 1), (0, 0), (-3, 4), (1001, 2)])
    def test_invalid_dimensions(self, width, height):
        with pytest.raises(ConfigurationError):
            create_maze(width, height)

    @pytest.mark.parametrize("value", [2.5, "10", None, True])
    def test_non_integer_dimensions(self, value):
        with pytest.raises(ConfigurationError):
            Maze(value, 5)

    def test_custom_start_and_finish(self):
        maze = Maze(4, 4, start=(1, 0), finish={"x": 3, "y": 1})
        assert maze.start == Position(1, 0)
        assert maze.finish == Position(3, 1)

    def test_out_of_bounds_start(self):
        with pytest.raises(ConfigurationError, match="start"):
            Maze(4, 4, start=(4, 0))


class TestMazeAccess:
    """Test cell access and neighborhood queries."""

    def test_get_cell_out_of_bounds_returns_none(self, walled_maze):
        assert walled_maze.get_cell(-1, 0) is None
        assert walled_maze.get_cell(4, 0) is None
        assert walled_maze.get_cell(0, 3) is None
        assert walled_maze.get_cell(3, 2) is not None

    def test_set_cell(self, walled_maze):
        replacement = Cell(north=False)
        walled_maze.set_cell(1, 1, replacement)
        assert walled_maze.get_cell(1, 1) is replacement

    def test_set_cell_out_of_bounds_is_ignored(self, walled_maze):
        before = walled_maze.copy()
        walled_maze.set_cell(10, 10, Cell())
        assert walled_maze == before

    def test_set_cell_rejects_non_cells(self, walled_maze):
        with pytest.raises(TypeError):
            walled_maze.set_cell(0, 0, {"walls": []})

    def test_positions_are_row_major(self):
        maze = create_maze(3, 2)
        assert list(maze.positions()) == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]

    def test_corner_has_two_neighbors(self, walled_maze):
        neighbors = dict(walled_maze.neighbors(0, 0))
        assert neighbors == {Direction.EAST: Position(1, 0), Direction.SOUTH: Position(0, 1)}

    def test_internal_edge_count(self):
        maze = create_maze(5, 4)
        edges = list(maze.internal_edges())
        assert len(edges) == 4 * 5 + 5 * 3
        assert {direction for _, direction in edges} == {Direction.EAST, Direction.SOUTH}


class TestCarving:
    """Test that carving keeps both sides of an edge in agreement."""

    @pytest.mark.parametrize("direction", list(DIRECTIONS))
    def test_carve_opens_both_sides(self, direction):
        maze = create_maze(3, 3)
        maze.carve(1, 1, direction)
        neighbor = maze.neighbor(1, 1, direction)

        assert not maze.get_cell(1, 1).has_wall(direction)
        assert not maze.get_cell(*neighbor).has_wall(direction.opposite)

    def test_build_wall_closes_both_sides(self, corridor_maze):
        corridor_maze.build_wall(0, 0, Direction.EAST)
        assert corridor_maze.get_cell(0, 0).has_wall(Direction.EAST)
        assert corridor_maze.get_cell(1, 0).has_wall(Direction.WEST)

    def test_carve_on_boundary_only_touches_one_cell(self, walled_maze):
        walled_maze.carve(0, 0, Direction.NORTH)
        assert not walled_maze.get_cell(0, 0).has_wall(Direction.NORTH)

    def test_carve_outside_grid_raises(self, walled_maze):
        with pytest.raises(StructuralError):
            walled_maze.carve(7, 7, Direction.EAST)

    def test_degree_counts_open_sides(self, corridor_maze):
        assert corridor_maze.degree(0, 0) == 1
        assert corridor_maze.degree(1, 0) == 2
        assert corridor_maze.degree(0, 1) == 1

    def test_fill_walls(self, corridor_maze):
        corridor_maze.fill_walls()
        assert all(cell.wall_count == 4 for _, cell in corridor_maze.cells())


class TestBoundary:
    """Test sealing and entrance placement."""

    def test_default_entrances(self, corridor_maze):
        corridor_maze.seal_boundary()
        start_side, finish_side = corridor_maze.open_entrances()

        assert start_side is Direction.WEST
        assert finish_side is Direction.EAST
        assert not corridor_maze.get_cell(0, 0).has_wall(Direction.WEST)
        assert not corridor_maze.get_cell(1, 1).has_wall(Direction.EAST)

    def test_boundary_side_preference(self):
        maze = create_maze(4, 4)
        # (2, 0) touches only the north boundary
        assert maze.boundary_side(Position(2, 0), (Direction.WEST, Direction.NORTH)) is Direction.NORTH
        assert maze.boundary_side(Position(1, 1)) is None

    def test_seal_boundary_closes_outer_walls(self):
        maze = create_maze(3, 3)
        maze.carve(0, 0, Direction.WEST)
        maze.carve(2, 2, Direction.SOUTH)
        maze.seal_boundary()
        assert maze.get_cell(0, 0).has_wall(Direction.WEST)
        assert maze.get_cell(2, 2).has_wall(Direction.SOUTH)


class TestValidity:
    """Test the cheap structural validity check."""

    def test_fully_walled_maze_is_invalid(self, walled_maze):
        assert not walled_maze.is_valid()

    def test_carved_maze_is_valid(self, corridor_maze):
        assert corridor_maze.is_valid()

    def test_missing_row_is_invalid(self, corridor_maze):
        corridor_maze._cells.pop()
        assert not corridor_maze.is_valid()

    def test_foreign_cell_is_invalid(self, corridor_maze):
        corridor_maze._cells[0][0] = None
        assert not corridor_maze.is_valid()

    def test_finish_out_of_bounds_is_invalid(self, corridor_maze):
        corridor_maze.finish = Position(5, 5)
        assert not corridor_maze.is_valid()


class TestSerialization:
    """Test dict snapshots and copies."""

    def test_dict_layout(self, corridor_maze):
        data = corridor_maze.to_dict()
        assert data["width"] == 2
        assert data["height"] == 2
        assert data["start"] == {"x": 0, "y": 0}
        assert data["finish"] == {"x": 1, "y": 1}
        assert data["cells"][0][0] == {"walls": ["N", "S", "W"]}
        assert "portals" not in data

    def test_round_trip_with_portals(self, corridor_maze):
        corridor_maze.portals = [Portal(Position(0, 0), Position(1, 0), layer_pair="0-1")]
        corridor_maze.layers = 2
        corridor_maze.width_per_layer = 1
        corridor_maze.height_per_layer = 2

        restored = Maze.from_dict(corridor_maze.to_dict())

        assert restored == corridor_maze
        assert restored.to_dict()["portals"] == [{"from": {"x": 0, "y": 0}, "to": {"x": 1, "y": 0}, "layer_pair": "0-1"}]

    def test_from_dict_rejects_shape_mismatch(self, corridor_maze):
        data = corridor_maze.to_dict()
        data["cells"] = data["cells"][:1]
        with pytest.raises(ConfigurationError):
            Maze.from_dict(data)

    def test_copy_is_deep(self, corridor_maze):
        duplicate = corridor_maze.copy()
        assert duplicate == corridor_maze

        duplicate.build_wall(0, 0, Direction.EAST)
        assert duplicate != corridor_maze
        assert not corridor_maze.get_cell(0, 0).has_wall(Direction.EAST)

    def test_maze_is_unhashable(self, corridor_maze):
        with pytest.raises(TypeError):
            hash(corridor_maze)
