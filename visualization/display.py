"""Display utilities for tiles, arrangements and composite images."""

import cv2
import numpy as np
import matplotlib.pyplot as plt
from typing import Optional
from pathlib import Path

from core.tile import BACKGROUND, FOREGROUND, MARKED, Tile


# BGR colours per pixel symbol
PIXEL_COLORS = {
    BACKGROUND: (112, 48, 16),    # deep water
    FOREGROUND: (230, 200, 120),  # waves
    MARKED: (40, 200, 40),        # pattern match
}
UNKNOWN_COLOR = (0, 0, 0)


def render_pixels(pixels: np.ndarray, scale: int = 1) -> np.ndarray:
    """
    Convert a symbol buffer into a BGR image.

    Args:
        pixels: 2-D array of pixel symbols
        scale: Integer upscaling factor (nearest neighbour)

    Returns:
        (H * scale, W * scale, 3) uint8 BGR image
    """
    if scale < 1:
        raise ValueError(f"Scale must be >= 1, got {scale}")

    image = np.empty(pixels.shape + (3,), dtype=np.uint8)
    image[...] = UNKNOWN_COLOR
    for symbol, color in PIXEL_COLORS.items():
        image[pixels == symbol] = color

    if scale > 1:
        h, w = pixels.shape
        image = cv2.resize(image, (w * scale, h * scale), interpolation=cv2.INTER_NEAREST)

    return image


def save_image(tile: Tile, output_path: str, scale: int = 8):
    """
    Render a tile and write it to disk.

    Args:
        tile: Tile (typically the marked composite)
        output_path: Destination image path (format from extension)
        scale: Upscaling factor
    """
    output_dir = Path(output_path).parent
    if output_dir and str(output_dir) != '.':
        output_dir.mkdir(parents=True, exist_ok=True)

    if not cv2.imwrite(str(output_path), render_pixels(tile.pixels, scale)):
        raise ValueError(f"Could not write image: {output_path}")


def display_image(tile: Tile, title: Optional[str] = None, figsize: tuple = (8, 8)):
    """Show a single tile."""
    plt.figure(figsize=figsize)
    plt.imshow(cv2.cvtColor(render_pixels(tile.pixels), cv2.COLOR_BGR2RGB))
    plt.title(title if title is not None else f"Tile {tile.id}")
    plt.axis('off')
    plt.tight_layout()
    plt.show()


def display_comparison(composite: Tile, marked: Tile,
                       matches: Optional[int] = None,
                       title_composite: str = "Assembled",
                       title_marked: str = "Oriented",
                       figsize: tuple = (12, 6)):
    """
    Display the raw composite and the marked, oriented composite side by side.

    Args:
        composite: Composite image as assembled
        marked: Oriented composite with pattern matches marked
        matches: Optional match count to display
        title_composite: Title for the raw composite
        title_marked: Title for the marked composite
        figsize: Figure size
    """
    fig, axes = plt.subplots(1, 2, figsize=figsize)

    axes[0].imshow(cv2.cvtColor(render_pixels(composite.pixels), cv2.COLOR_BGR2RGB))
    axes[0].set_title(title_composite)
    axes[0].axis('off')

    marked_title = title_marked
    if matches is not None:
        marked_title = f"{title_marked} (Matches: {matches})"

    axes[1].imshow(cv2.cvtColor(render_pixels(marked.pixels), cv2.COLOR_BGR2RGB))
    axes[1].set_title(marked_title)
    axes[1].axis('off')

    plt.tight_layout()
    plt.show()


def display_arrangement(grid, figsize: Optional[tuple] = None):
    """
    Display the arranged tiles in their grid layout, titled by id.

    Args:
        grid: Arranged solvers.Grid
        figsize: Figure size
    """
    size = grid.size
    if figsize is None:
        figsize = (size * 2, size * 2)

    fig, axes = plt.subplots(size, size, figsize=figsize)
    axes = np.array(axes).reshape(size, size)

    for r, row in enumerate(grid.arrangement):
        for c, tile in enumerate(row):
            ax = axes[r, c]
            ax.axis('off')
            if tile is None:
                continue
            ax.imshow(cv2.cvtColor(render_pixels(tile.pixels), cv2.COLOR_BGR2RGB))
            ax.set_title(str(tile.id), fontsize=8)

    plt.tight_layout()
    plt.show()
