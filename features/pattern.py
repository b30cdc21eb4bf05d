"""
Pattern matching over every orientation of an image.

Only one orientation of a correctly assembled image contains the pattern.
The first orientation with at least one match is kept, and its foreground
pixels not claimed by any match are counted.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from core.template import ShapeTemplate
from core.tile import FOREGROUND, Tile

from .orientation import Orientation


SEA_MONSTER = (
    "..................#.",
    "#....##....##....###",
    ".#..#..#..#..#..#...",
)

SEA_MONSTER_TEMPLATE = ShapeTemplate.parse(SEA_MONSTER)


@dataclass
class PatternScan:
    """Outcome of the pattern search on the matching orientation."""
    orientation: Orientation
    image: Tile
    matches: int
    unmatched_foreground: int


def mark_and_count(image: Tile, template: ShapeTemplate) -> Tuple[int, int]:
    """
    Mark template matches in place, then count the remaining foreground.

    Returns:
        matches: Number of matches marked by this call
        unmatched_foreground: Foreground pixels left after marking
    """
    matches = image.find_shape(template)
    return matches, image.count_char(FOREGROUND)


def scan_orientations(orientations: Mapping[Orientation, Tile],
                      template: ShapeTemplate) -> Optional[PatternScan]:
    """
    Search oriented images in order until one contains the template.

    Orientations without matches are left untouched, since find_shape only
    writes to matched cells.

    Args:
        orientations: Orientation -> oriented image
        template: Pattern to look for

    Returns:
        PatternScan for the first orientation with matches, or None
    """
    for orientation, image in orientations.items():
        matches, unmatched = mark_and_count(image, template)
        if matches > 0:
            return PatternScan(orientation, image, matches, unmatched)
    return None
