"""
Backtracking arrangement search.

Cells are filled in row-major order:
- (0, 0) is seeded with every available tile in every orientation
- other cells probe the edge index with the left neighbour's RIGHT edge,
  or with the upper neighbour's BOTTOM edge in the first column
- cells with both neighbours also check TOP against the tile above

Placed tiles are popped from the available map and reinserted when their
branch fails, so each search node costs O(1) bookkeeping.
"""

from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from core.tile import Side
from features.assembly import Arrangement

from .edge_index import EdgeIndex, Variant, VariantMap


class ArrangementSearch:
    """
    One backtracking run over a size x size grid.

    Args:
        size: Grid dimension (cells per row and per column)
        variant_map: (tile_id, orientation) -> oriented Tile
        edge_index: Side -> edge value -> variants
    """

    def __init__(self, size: int, variant_map: VariantMap, edge_index: EdgeIndex):
        self.size = size
        self.variant_map = variant_map
        self.edge_index = edge_index

        self.available: Dict[int, List[Variant]] = defaultdict(list)
        for variant in variant_map:
            self.available[variant.tile_id].append(variant)
        self.available = dict(self.available)

        self.arrangement: Arrangement = [[None] * size for _ in range(size)]
        self.placements = 0
        self.backtracks = 0

    def run(self) -> Optional[Arrangement]:
        """
        Search for a complete arrangement.

        Returns:
            The filled arrangement, or None if the search space is exhausted
        """
        if self.size == 0 or len(self.available) != self.size * self.size:
            return None

        for tile_id in list(self.available):
            variants = self.available.pop(tile_id)

            for variant in variants:
                self.arrangement[0][0] = self.variant_map[variant]
                self.placements += 1

                if self._fill(*self._next_cell(0, 0)):
                    return self.arrangement

                self.arrangement[0][0] = None
                self.backtracks += 1

            self.available[tile_id] = variants

        return None

    def _next_cell(self, row: int, col: int) -> Tuple[int, int]:
        col += 1
        if col == self.size:
            return row + 1, 0
        return row, col

    def _candidates(self, row: int, col: int) -> List[Variant]:
        if col > 0:
            side, probe = Side.LEFT, self.arrangement[row][col - 1].right
        else:
            side, probe = Side.TOP, self.arrangement[row - 1][col].bottom

        return [v for v in self.edge_index[side].get(probe, ())
                if v.tile_id in self.available]

    def _fill(self, row: int, col: int) -> bool:
        if row == self.size:
            return True

        above = self.arrangement[row - 1][col] if row > 0 else None

        for variant in self._candidates(row, col):
            tile = self.variant_map[variant]

            # First-column cells were probed by TOP already
            if col > 0 and above is not None and tile.top != above.bottom:
                continue

            variants = self.available.pop(variant.tile_id)
            self.arrangement[row][col] = tile
            self.placements += 1

            if self._fill(*self._next_cell(row, col)):
                return True

            self.arrangement[row][col] = None
            self.available[variant.tile_id] = variants
            self.backtracks += 1

        return False


def search_arrangement(size: int, variant_map: VariantMap, edge_index: EdgeIndex,
                       verbose: bool = False) -> Optional[Arrangement]:
    """
    Run a backtracking search and report progress.

    Returns:
        The filled arrangement, or None if no arrangement exists
    """
    search = ArrangementSearch(size, variant_map, edge_index)

    if verbose:
        print(f"  Searching {size}x{size} grid "
              f"({len(search.available)} tiles, {len(variant_map)} variants)...")

    arrangement = search.run()

    if verbose:
        status = "found" if arrangement is not None else "not found"
        print(f"  Arrangement {status}: {search.placements} placements, "
              f"{search.backtracks} backtracks")

    return arrangement
