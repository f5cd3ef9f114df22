"""
Command-line interface for gridmaze.

Provides commands to generate mazes, list the available algorithms, analyze
saved mazes and produce worksheet tier sets.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import click

from gridmaze import __version__
from gridmaze.algorithms.registry import list_algorithms
from gridmaze.analysis.connectivity import is_solvable, verify_perfect_maze
from gridmaze.analysis.distribution import analyze_distribution
from gridmaze.config.options import MazeAlgorithm
from gridmaze.config.pydantic_config import DistributionTarget, build_config
from gridmaze.io.json_io import dumps_maze, load_maze_json, save_maze_json
from gridmaze.io.raster import to_ascii
from gridmaze.pipeline import generate_maze, generate_worksheet_set
from gridmaze.utils.exceptions import MazeError
from gridmaze.utils.logging import configure_logging

ALGORITHM_NAMES = [algorithm.value for algorithm in MazeAlgorithm]


def _setup_logging(verbose: bool) -> None:
    configure_logging(level="DEBUG" if verbose else "WARNING")


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="gridmaze")
def main():
    """
    gridmaze: Grid Maze Generator

    Twelve classical generation algorithms with loop control and
    degree-distribution balancing.
    """


@main.command()
@click.argument("algorithm", type=click.Choice(ALGORITHM_NAMES, case_sensitive=False))
@click.option("--width", "-W", type=int, default=20, help="Number of columns (per layer for multi-layer)")
@click.option("--height", "-H", type=int, default=20, help="Number of rows")
@click.option("--seed", type=int, default=None, help="Seed for reproducible generation")
@click.option("--braidness", type=float, default=None, help="Braided: fraction of dead ends to remove")
@click.option("--loop-fraction", type=float, default=None, help="Sparse loop: fraction of walls to remove")
@click.option("--layers", type=int, default=None, help="Multi-layer: number of layers (2-5)")
@click.option("--portals", type=int, default=None, help="Multi-layer: number of portals (1-10)")
@click.option("--single-path", is_flag=True, help="Reduce loop algorithms to a perfect maze")
@click.option(
    "--balance",
    type=float,
    nargs=3,
    default=None,
    metavar="DEAD THREE STRAIGHT",
    help="Target dead-end, three-way and straight ratios",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Output file")
@click.option("--format", "output_format", type=click.Choice(["json", "ascii"]), default="ascii", help="Output format")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def generate(
    algorithm,
    width,
    height,
    seed,
    braidness,
    loop_fraction,
    layers,
    portals,
    single_path,
    balance,
    output,
    output_format,
    verbose,
):
    """
    Generate a maze.

    Examples:
        gridmaze generate wilsons --width 30 --height 20 --seed 1
        gridmaze generate braided --braidness 0.8 --format json -o maze.json
        gridmaze generate multi-layer --layers 3 --portals 5
    """
    _setup_logging(verbose)

    candidate_options = {
        "braidness": braidness,
        "loop_fraction": loop_fraction,
        "layers": layers,
        "portals": portals,
    }
    options = {key: value for key, value in candidate_options.items() if value is not None}

    try:
        target = None
        if balance:
            dead, three, straight = balance
            target = DistributionTarget(dead_ends=dead, three_way=three, straight=straight)
        config = build_config(
            algorithm=algorithm,
            width=width,
            height=height,
            options=options,
            seed=seed,
            single_path=single_path,
            balance=target,
        )
        result = generate_maze(config)
    except (ValueError, MazeError) as e:
        # pydantic ValidationError is a ValueError
        _fail(str(e))

    maze = result.maze
    rendered = dumps_maze(maze) if output_format == "json" else to_ascii(maze)

    if output:
        if output_format == "json":
            save_maze_json(maze, output)
        else:
            Path(output).write_text(rendered + "\n", encoding="utf-8")
        click.echo(f"Saved {maze.width}x{maze.height} {algorithm} maze to: {output}")
    else:
        click.echo(rendered)

    if verbose:
        click.echo(f"Open edges: {result.open_edges} (perfect: {result.is_perfect})", err=True)
        if result.edges_removed:
            click.echo(f"Edges removed by single-path reduction: {result.edges_removed}", err=True)


@main.command()
def algorithms():
    """List the available generation algorithms."""
    for info in list_algorithms():
        kind = "loops" if info.has_loops else "perfect"
        click.echo(f"{info.algorithm.value:<22} {kind:<8} max {info.max_size:<4} {info.description}")


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def analyze(path):
    """Analyze a maze saved as JSON."""
    try:
        maze = load_maze_json(path)
    except (ValueError, KeyError) as e:
        _fail(f"Could not read maze from {path}: {e}")

    verification = verify_perfect_maze(maze)
    distribution = analyze_distribution(maze)

    click.echo(f"Size: {maze.width}x{maze.height} ({maze.total_cells} cells)")
    if maze.layers:
        click.echo(f"Layers: {maze.layers} of {maze.width_per_layer}x{maze.height_per_layer}, portals: {len(maze.portals)}")
    click.echo(f"Valid: {maze.is_valid()}")
    click.echo(f"Connected: {verification['is_connected']}")
    click.echo(f"Solvable: {is_solvable(maze)}")
    click.echo(
        f"Perfect: {verification['is_perfect']} "
        f"({verification['passage_count']} passages, {verification['expected_passages']} expected)"
    )
    click.echo("Degree distribution:")
    for name, ratio in distribution.as_dict().items():
        click.echo(f"  {name:<10} {ratio:6.1%}")


@main.command()
@click.option("--seed", type=int, default=None, help="Seed for reproducible worksheet sets")
@click.option("--max-attempts", type=int, default=10, help="Retries per tier before giving up")
@click.option("--output-dir", "-o", type=click.Path(file_okay=False), default=".", help="Directory for JSON files")
def worksheet(seed, max_attempts, output_dir):
    """Generate the easy, medium and hard worksheet mazes as JSON files."""
    try:
        mazes = generate_worksheet_set(seed=seed, max_attempts=max_attempts)
    except MazeError as e:
        _fail(str(e))

    for name, maze in mazes.items():
        path = save_maze_json(maze, Path(output_dir) / f"maze_{name}.json")
        click.echo(f"{name:<7} {maze.width}x{maze.height} -> {path}")


if __name__ == "__main__":
    main()
