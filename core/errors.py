"""Exceptions raised by the tile reassembly engine."""


class JigsawError(Exception):
    """Base class for all tile reassembly errors."""


class InvalidInput(JigsawError, ValueError):
    """Malformed tile block, tile set or shape template."""


class ArrangementNotFound(JigsawError, LookupError):
    """No complete arrangement is available for the requested operation."""
