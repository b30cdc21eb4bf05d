"""Orientation enumeration, composite assembly and pattern matching."""
from .orientation import Orientation, enumerate_orientations
from .assembly import assemble_composite, COMPOSITE_TILE_ID
from .pattern import (
    PatternScan,
    SEA_MONSTER,
    SEA_MONSTER_TEMPLATE,
    mark_and_count,
    scan_orientations
)
