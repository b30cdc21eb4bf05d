"""
Rigid-motion orientations of a square tile.

A square has exactly 8 orientations (the dihedral group of order 8):
4 rotations, each optionally preceded by a horizontal mirror.
"""

from dataclasses import dataclass
from typing import Dict, List

from core.tile import Tile


@dataclass(frozen=True)
class Orientation:
    """
    Mirror horizontally (if mirrored), then rotate right quarter_turns times.
    """
    quarter_turns: int = 0
    mirrored: bool = False

    def __post_init__(self):
        if self.quarter_turns not in (0, 1, 2, 3):
            raise ValueError(f"quarter_turns must be 0-3, got {self.quarter_turns}")

    @classmethod
    def all(cls) -> List['Orientation']:
        """All 8 orientations: unmirrored 0/90/180/270, then mirrored."""
        return [cls(turns, mirrored) for mirrored in (False, True) for turns in range(4)]

    @property
    def index(self) -> int:
        """Dense index in 0..7, matching the order of all()."""
        return 4 * int(self.mirrored) + self.quarter_turns

    @property
    def degrees(self) -> int:
        return 90 * self.quarter_turns

    def apply(self, tile: Tile) -> Tile:
        oriented = tile.flip_horizontal() if self.mirrored else tile
        for _ in range(self.quarter_turns):
            oriented = oriented.rotate_right()
        return oriented

    def __str__(self) -> str:
        return f"{'mirror+' if self.mirrored else ''}rot{self.degrees}"


def enumerate_orientations(tile: Tile) -> Dict[Orientation, Tile]:
    """
    Produce the 8 oriented variants of a tile.

    Built incrementally: four successive right rotations of the tile, then
    four of its horizontal mirror. Symmetric tiles yield repeated pixel
    buffers under distinct orientations; nothing is deduplicated.
    """
    variants = {}
    for mirrored in (False, True):
        oriented = tile.flip_horizontal() if mirrored else Tile(tile.id, tile.pixels)
        for turns in range(4):
            if turns:
                oriented = oriented.rotate_right()
            variants[Orientation(turns, mirrored)] = oriented
    return variants
