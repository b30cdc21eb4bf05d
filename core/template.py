"""Sparse shape templates searched for inside tiles."""

from typing import List, Sequence, Tuple

import numpy as np

from .errors import InvalidInput
from .tile import FOREGROUND, PIXEL_ALPHABET


class ShapeTemplate:
    """
    Foreground offsets of a pattern relative to its top-left anchor.

    Only '#' cells take part in matching; '.' cells are ignored, so rows may
    have different lengths.
    """

    def __init__(self, offsets: Sequence[Tuple[int, int]]):
        if not offsets:
            raise InvalidInput("Shape template has no foreground cells")

        self.offsets: List[Tuple[int, int]] = sorted(set(offsets))
        self.row_offsets = np.array([r for r, _ in self.offsets], dtype=np.intp)
        self.col_offsets = np.array([c for _, c in self.offsets], dtype=np.intp)

        if self.row_offsets.min() < 0 or self.col_offsets.min() < 0:
            raise InvalidInput(f"Shape template offsets must be non-negative: {self.offsets}")

        self.height = int(self.row_offsets.max()) + 1
        self.width = int(self.col_offsets.max()) + 1

    @classmethod
    def parse(cls, lines: Sequence[str]) -> 'ShapeTemplate':
        """
        Parse template rows of '#' (required foreground) and '.' (ignored).

        Raises:
            InvalidInput: If the block is empty, holds other symbols or has no '#'
        """
        rows = [line.rstrip() for line in lines]
        if not any(rows):
            raise InvalidInput("Shape template is empty")

        unknown = set(''.join(rows)) - PIXEL_ALPHABET
        if unknown:
            raise InvalidInput(f"Shape template has unexpected symbols {sorted(unknown)}")

        offsets = [(r, c)
                   for r, row in enumerate(rows)
                   for c, ch in enumerate(row)
                   if ch == FOREGROUND]
        return cls(offsets)

    @property
    def size(self) -> int:
        """Number of foreground cells claimed by one match."""
        return len(self.offsets)

    def __repr__(self) -> str:
        return f"ShapeTemplate({self.height}x{self.width}, {self.size} cells)"
