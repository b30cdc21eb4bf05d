"""
Variant table and edge index.

Every tile is expanded into its 8 orientations (variants). The search only
ever probes a candidate's TOP edge (against the tile above) or LEFT edge
(against the tile to the left), so only those two sides are indexed.
"""

from collections import defaultdict
from typing import Dict, List, Mapping, NamedTuple

from core.tile import Side, Tile
from features.orientation import Orientation, enumerate_orientations


INDEXED_SIDES = (Side.TOP, Side.LEFT)


class Variant(NamedTuple):
    """A tile fixed to one orientation."""
    tile_id: int
    orientation: Orientation


VariantMap = Dict[Variant, Tile]
EdgeIndex = Dict[Side, Dict[int, List[Variant]]]


def build_variant_map(tiles: Mapping[int, Tile]) -> VariantMap:
    """All tiles x all 8 orientations, in tile order then orientation order."""
    variant_map = {}
    for tile_id, tile in tiles.items():
        for orientation, oriented in enumerate_orientations(tile).items():
            variant_map[Variant(tile_id, orientation)] = oriented
    return variant_map


def build_edge_index(variant_map: Mapping[Variant, Tile]) -> EdgeIndex:
    """
    Map each indexed side's edge value to the variants carrying it.

    Returns:
        edge_index[side][edge] -> list of Variants, in variant table order
    """
    edge_index = {side: defaultdict(list) for side in INDEXED_SIDES}

    for variant, tile in variant_map.items():
        for side in INDEXED_SIDES:
            edge_index[side][tile.get_edge(side)].append(variant)

    return {side: dict(edges) for side, edges in edge_index.items()}
