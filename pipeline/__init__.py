"""
Pipeline orchestration.

1. solve_jigsaw() - arrange tiles, assemble the composite, locate the pattern
2. solve_file() - same, reading the tiles from a text file
"""
from .solver_pipeline import (
    SolverConfig,
    JigsawResult,
    DEFAULT_CONFIG,
    locate_pattern,
    solve_jigsaw,
    solve_file
)
