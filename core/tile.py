"""
Square pixel tiles and their geometric transforms.

A tile is a 2-D buffer of single-character pixels:
- '#' foreground
- '.' background
- 'O' foreground claimed by a shape match (only after find_shape)

Each border is encoded as an integer so two borders compare in O(1).
"""

import re
from enum import Enum
from typing import List, Sequence, Tuple

import numpy as np

from .errors import InvalidInput


FOREGROUND = '#'
BACKGROUND = '.'
MARKED = 'O'
PIXEL_ALPHABET = frozenset(FOREGROUND + BACKGROUND)

TITLE_PATTERN = re.compile(r"Tile\s+(\d+):")


class Side(Enum):
    TOP = 'top'
    BOTTOM = 'bottom'
    LEFT = 'left'
    RIGHT = 'right'


def encode_edge(border) -> int:
    """
    Encode a 1-pixel border as an integer, most significant bit first.

    Foreground pixels are 1, everything else 0. Python ints are unbounded,
    so borders of any length encode exactly.
    """
    value = 0
    for pixel in np.asarray(border).tolist():
        value = (value << 1) | (pixel == FOREGROUND)
    return value


class Tile:
    """
    One rectangular pixel tile with a numeric identifier.

    Transforms never touch the receiver; they return a new Tile with its
    own pixel buffer and recomputed edges.
    """

    def __init__(self, tile_id: int, pixels):
        pixels = np.array(pixels, dtype='<U1')
        if pixels.ndim != 2 or pixels.size == 0:
            raise InvalidInput(f"Tile {tile_id}: expected a non-empty 2-D pixel buffer, "
                               f"got shape {pixels.shape}")

        self.id = tile_id
        self.pixels = pixels
        self.top, self.bottom, self.left, self.right = self._make_edges()

    def _make_edges(self) -> Tuple[int, int, int, int]:
        return (
            encode_edge(self.pixels[0, :]),
            encode_edge(self.pixels[-1, :]),
            encode_edge(self.pixels[:, 0]),
            encode_edge(self.pixels[:, -1]),
        )

    @classmethod
    def from_rows(cls, tile_id: int, rows: Sequence[str]) -> 'Tile':
        """Create a tile from text rows."""
        return cls(tile_id, [list(row) for row in rows])

    @classmethod
    def parse(cls, lines: Sequence[str]) -> 'Tile':
        """
        Parse a tile block.

        Args:
            lines: 'Tile <id>:' followed by equal-length rows of '#' and '.'

        Returns:
            Parsed Tile

        Raises:
            InvalidInput: If the block is empty, the id is unreadable, there
                          are no rows, rows are ragged or contain other symbols
        """
        lines = [line.strip() for line in lines]
        if not lines:
            raise InvalidInput("Could not construct tile from an empty block")

        match = TITLE_PATTERN.fullmatch(lines[0])
        if match is None:
            raise InvalidInput(f"Could not read tile identifier from {lines[0]!r}")
        tile_id = int(match.group(1))

        rows = lines[1:]
        if not rows:
            raise InvalidInput(f"Tile {tile_id}: block has no pixel rows")

        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise InvalidInput(f"Tile {tile_id}: rows have different lengths {sorted(widths)}")

        unknown = set(''.join(rows)) - PIXEL_ALPHABET
        if unknown:
            raise InvalidInput(f"Tile {tile_id}: unexpected pixel symbols {sorted(unknown)}")

        return cls.from_rows(tile_id, rows)

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.pixels.shape

    def edges(self) -> Tuple[int, int, int, int]:
        """Return (top, bottom, left, right) edge values."""
        return self.top, self.bottom, self.left, self.right

    def get_edge(self, side: Side) -> int:
        if side is Side.TOP:
            return self.top
        elif side is Side.BOTTOM:
            return self.bottom
        elif side is Side.LEFT:
            return self.left
        elif side is Side.RIGHT:
            return self.right
        else:
            raise ValueError(f"Unknown side: {side}")

    # =========================================================================
    # TRANSFORMS
    # =========================================================================

    def flip_horizontal(self) -> 'Tile':
        """Mirror left-right (reverse each row)."""
        return Tile(self.id, np.fliplr(self.pixels))

    def flip_vertical(self) -> 'Tile':
        """Mirror top-bottom (reverse the row order)."""
        return Tile(self.id, np.flipud(self.pixels))

    def rotate_right(self) -> 'Tile':
        """Rotate 90 degrees clockwise."""
        return Tile(self.id, np.rot90(self.pixels, k=-1))

    def rotate_left(self) -> 'Tile':
        """Rotate 90 degrees counter-clockwise."""
        return Tile(self.id, np.rot90(self.pixels, k=1))

    def interior(self) -> np.ndarray:
        """Copy of the pixels without the 1-pixel border."""
        return self.pixels[1:-1, 1:-1].copy()

    # =========================================================================
    # SHAPE MATCHING
    # =========================================================================

    def find_shape(self, template) -> int:
        """
        Mark every occurrence of a shape template and count them.

        Anchors are scanned in row-major order. An anchor matches when every
        template offset lands on a foreground pixel; the matched cells are
        overwritten with MARKED right away, so a later overlapping anchor
        cannot reuse them.

        Args:
            template: ShapeTemplate (row/col offset arrays plus bounding box)

        Returns:
            Number of matches found in this orientation
        """
        rows, cols = template.row_offsets, template.col_offsets
        count = 0

        for r in range(self.height - template.height + 1):
            for c in range(self.width - template.width + 1):
                cells = (rows + r, cols + c)
                if np.all(self.pixels[cells] == FOREGROUND):
                    self.pixels[cells] = MARKED
                    count += 1

        return count

    def count_char(self, value: str) -> int:
        """Count pixels equal to value."""
        return int(np.count_nonzero(self.pixels == value))

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_lines(self) -> List[str]:
        """Header line followed by one line per pixel row."""
        return [f"Tile {self.id}:"] + [''.join(row) for row in self.pixels.tolist()]

    def __str__(self) -> str:
        return '\n'.join(self.to_lines())

    def __repr__(self) -> str:
        return f"Tile(id={self.id}, {self.height}x{self.width})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self.id == other.id and np.array_equal(self.pixels, other.pixels)

    __hash__ = None
