"""
Tile arrangement solvers.

Usage:
    from core import load_lines
    from solvers import Grid

    grid = Grid.from_lines(load_lines("tiles.txt"))
    if grid.arrange():
        print(grid.get_corner_product())
"""
from .edge_index import (
    Variant,
    build_variant_map,
    build_edge_index,
    INDEXED_SIDES
)
from .search import ArrangementSearch, search_arrangement
from .grid import Grid
