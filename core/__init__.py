"""Core tile types, input loading and errors."""
from .errors import JigsawError, InvalidInput, ArrangementNotFound
from .loading import load_lines, lines_from_text
from .splitting import split_blocks
from .tile import Tile, Side, encode_edge, FOREGROUND, BACKGROUND, MARKED
from .template import ShapeTemplate
