"""Visualization utilities for tile reassembly."""
from .display import (
    render_pixels,
    save_image,
    display_image,
    display_comparison,
    display_arrangement
)
