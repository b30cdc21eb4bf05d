"""Test that all modules can be imported correctly."""


def test_core_imports():
    """Test core module imports."""
    from core import Tile, ShapeTemplate, load_lines, split_blocks
    from core.errors import JigsawError, InvalidInput, ArrangementNotFound
    from core.tile import encode_edge, Side
    from core.loading import lines_from_text


def test_features_imports():
    """Test features module imports."""
    from features import Orientation, enumerate_orientations, assemble_composite
    from features.pattern import scan_orientations, mark_and_count, SEA_MONSTER
    from features.assembly import Arrangement, COMPOSITE_TILE_ID


def test_solvers_imports():
    """Test solvers module imports."""
    from solvers import Grid, ArrangementSearch, search_arrangement
    from solvers.edge_index import build_variant_map, build_edge_index, Variant


def test_pipeline_imports():
    """Test pipeline module imports."""
    from pipeline import solve_jigsaw, solve_file, SolverConfig
    from pipeline.solver_pipeline import locate_pattern, JigsawResult


def test_visualization_imports():
    """Test visualization module imports."""
    from visualization import render_pixels, save_image, display_comparison
    from visualization.display import display_arrangement, display_image


def test_cli_imports():
    """Test command-line entry point imports."""
    from solve_puzzle import main
