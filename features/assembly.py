"""Composite image assembly from a solved arrangement."""

from typing import List, Optional, Sequence

import numpy as np

from core.errors import ArrangementNotFound
from core.tile import Tile


COMPOSITE_TILE_ID = 0

Arrangement = List[List[Optional[Tile]]]


def assemble_composite(arrangement: Sequence[Sequence[Optional[Tile]]],
                       tile_id: int = COMPOSITE_TILE_ID) -> Tile:
    """
    Stitch the interiors of every arranged tile into one image.

    Args:
        arrangement: Fully filled grid of placed tiles (row-major)
        tile_id: Identifier for the composite tile

    Returns:
        Composite Tile; its edges are not meaningful

    Raises:
        ArrangementNotFound: If the arrangement is empty or has a gap
    """
    if not arrangement or not arrangement[0]:
        raise ArrangementNotFound("Cannot assemble an empty arrangement")

    bands = []
    for r, row in enumerate(arrangement):
        interiors = []
        for c, tile in enumerate(row):
            if tile is None:
                raise ArrangementNotFound(f"Arrangement cell ({r}, {c}) is empty")
            interiors.append(tile.interior())
        bands.append(np.hstack(interiors))

    return Tile(tile_id, np.vstack(bands))
