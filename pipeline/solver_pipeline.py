"""
Solver Pipeline

Orchestrates the full tile reassembly:
1. Parse tile blocks → Grid (variant table + edge index)
2. Arrange tiles (backtracking search) → corner product
3. Assemble the border-stripped composite image
4. Locate the pattern in every orientation of the composite
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from core.errors import ArrangementNotFound
from core.loading import load_lines
from core.template import ShapeTemplate
from core.tile import Tile
from features.assembly import COMPOSITE_TILE_ID
from features.pattern import SEA_MONSTER, PatternScan, scan_orientations
from solvers.grid import Grid


@dataclass
class SolverConfig:
    """
    Pipeline settings.

    template_lines is parsed eagerly, so an invalid template fails at
    construction time with InvalidInput.
    """
    template_lines: Tuple[str, ...] = SEA_MONSTER
    verbose: bool = True
    composite_id: int = COMPOSITE_TILE_ID
    template: ShapeTemplate = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self.template_lines = tuple(self.template_lines)
        self.template = ShapeTemplate.parse(self.template_lines)


DEFAULT_CONFIG = SolverConfig()


@dataclass
class JigsawResult:
    grid: Grid
    corner_product: int
    composite: Tile
    scan: Optional[PatternScan]

    @property
    def unmatched_foreground(self) -> Optional[int]:
        """Foreground pixels outside any pattern match, or None without a match."""
        if self.scan is None:
            return None
        return self.scan.unmatched_foreground


def locate_pattern(image: Tile, template: ShapeTemplate) -> Optional[PatternScan]:
    """
    Search all 8 orientations of an image for a template.

    The image is wrapped in a one-tile Grid so its orientations come from the
    same variant table the arrangement search uses. The input image itself is
    never marked.
    """
    image_grid = Grid.single(image)
    return scan_orientations(image_grid.orientations_of(image.id), template)


def solve_jigsaw(lines: Sequence[str], config: Optional[SolverConfig] = None) -> JigsawResult:
    """
    Solve a tile set end to end.

    Args:
        lines: Tile blocks separated by blank lines
        config: Pipeline settings (DEFAULT_CONFIG if omitted)

    Returns:
        JigsawResult with the arranged grid, corner product, composite image
        and pattern scan

    Raises:
        InvalidInput: If the tile blocks are malformed
        ArrangementNotFound: If no complete arrangement exists
    """
    config = config or DEFAULT_CONFIG
    verbose = config.verbose

    if verbose:
        print("\n" + "=" * 60)
        print("PHASE 1: Tile Arrangement")
        print("=" * 60)

    grid = Grid.from_lines(lines)

    if verbose:
        print(f"  Tiles: {grid.num_tiles}")
        print(f"  Grid: {grid.size}x{grid.size}")

    if not grid.arrange(verbose=verbose):
        raise ArrangementNotFound(f"No arrangement found for {grid.num_tiles} tiles")

    corner_product = grid.get_corner_product()

    if verbose:
        print(f"\n{grid}")
        print(f"\n  Corner product: {corner_product}")

    if verbose:
        print("\n" + "=" * 60)
        print("PHASE 2: Pattern Search")
        print("=" * 60)

    composite = grid.assemble(tile_id=config.composite_id)
    scan = locate_pattern(composite, config.template)

    if verbose:
        print(f"  Composite: {composite.height}x{composite.width}")
        if scan is None:
            print("  Pattern not found in any orientation")
        else:
            print(f"  Orientation: {scan.orientation}")
            print(f"  Matches: {scan.matches}")
            print(f"  Unmatched foreground: {scan.unmatched_foreground}")

    return JigsawResult(grid, corner_product, composite, scan)


def solve_file(input_path: Union[str, Path],
               config: Optional[SolverConfig] = None) -> JigsawResult:
    """Convenience wrapper: load lines from a file and solve them."""
    return solve_jigsaw(load_lines(input_path), config)
