"""
Grid of tiles: variant table, edge index and the arranged result.
"""

import math
from typing import Dict, List, Mapping, Sequence, Tuple

from core.errors import ArrangementNotFound, InvalidInput
from core.splitting import split_blocks
from core.tile import Tile
from features.assembly import Arrangement, COMPOSITE_TILE_ID, assemble_composite
from features.orientation import Orientation

from .edge_index import build_edge_index, build_variant_map
from .search import search_arrangement


class Grid:
    """
    Owns the input tiles and everything derived from them.

    Attributes:
        tiles: tile_id -> Tile, in input order
        size: cells per side, ceil(sqrt(tile count))
        variant_map: (tile_id, orientation) -> oriented Tile
        edge_index: Side -> edge value -> variants (TOP and LEFT only)
        arrangement: size x size cells, None until arrange() succeeds
    """

    def __init__(self, tiles: Mapping[int, Tile]):
        if not tiles:
            raise InvalidInput("Cannot build a grid without tiles")

        shapes = {tile.dimensions for tile in tiles.values()}
        if len(shapes) != 1:
            raise InvalidInput(f"Tiles must all share one shape, got {sorted(shapes)}")

        (height, width), = shapes
        if height != width:
            raise InvalidInput(f"Tiles must be square, got {height}x{width}")

        self.tiles: Dict[int, Tile] = dict(tiles)
        self.size = math.isqrt(len(self.tiles))
        if self.size * self.size < len(self.tiles):
            self.size += 1

        self.variant_map = build_variant_map(self.tiles)
        self.edge_index = build_edge_index(self.variant_map)
        self.arrangement: Arrangement = self._empty_arrangement()
        self._arranged = False

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> 'Grid':
        """
        Parse blank-line separated tile blocks.

        Raises:
            InvalidInput: If a block is malformed or an id repeats
        """
        tiles = {}
        for block in split_blocks(lines):
            tile = Tile.parse(block)
            if tile.id in tiles:
                raise InvalidInput(f"Duplicate tile id {tile.id}")
            tiles[tile.id] = tile

        return cls(tiles)

    @classmethod
    def single(cls, tile: Tile) -> 'Grid':
        """One-tile grid, used to enumerate the orientations of an image."""
        return cls({tile.id: tile})

    def _empty_arrangement(self) -> Arrangement:
        return [[None] * self.size for _ in range(self.size)]

    @property
    def num_tiles(self) -> int:
        return len(self.tiles)

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.size, self.size

    @property
    def is_arranged(self) -> bool:
        return self._arranged

    def orientations_of(self, tile_id: int) -> Dict[Orientation, Tile]:
        """The 8 variants of one tile, keyed by orientation."""
        return {variant.orientation: tile
                for variant, tile in self.variant_map.items()
                if variant.tile_id == tile_id}

    # =========================================================================
    # ARRANGEMENT
    # =========================================================================

    def arrange(self, verbose: bool = False) -> bool:
        """
        Place every tile exactly once so that all adjacent edges match.

        Returns:
            True if an arrangement was found and stored, False otherwise
        """
        arrangement = search_arrangement(self.size, self.variant_map,
                                         self.edge_index, verbose=verbose)
        if arrangement is None:
            self.arrangement = self._empty_arrangement()
            self._arranged = False
            return False

        self.arrangement = arrangement
        self._arranged = True
        return True

    def _require_arrangement(self):
        if not self._arranged:
            raise ArrangementNotFound("No arrangement found yet; call arrange() first")

    def get_corner_product(self) -> int:
        """Product of the tile ids in the four corners."""
        self._require_arrangement()

        last = self.size - 1
        product = 1
        for r, c in [(0, 0), (0, last), (last, 0), (last, last)]:
            tile = self.arrangement[r][c]
            if tile is None:
                raise ArrangementNotFound(f"Corner ({r}, {c}) is empty")
            product *= tile.id

        return product

    def placed_ids(self) -> List[int]:
        """Tile ids of the arrangement in row-major order (empty cells skipped)."""
        return [tile.id for row in self.arrangement for tile in row if tile is not None]

    def assemble(self, tile_id: int = COMPOSITE_TILE_ID) -> Tile:
        """Border-stripped composite image of the solved arrangement."""
        self._require_arrangement()
        return assemble_composite(self.arrangement, tile_id=tile_id)

    def __str__(self) -> str:
        return '\n'.join(
            '    '.join(str(tile.id) if tile is not None else 'XXXX' for tile in row)
            for row in self.arrangement
        )

    def __repr__(self) -> str:
        return f"Grid({self.num_tiles} tiles, {self.size}x{self.size})"
