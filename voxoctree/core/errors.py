"""
Error types raised while building chunk columns.
"""


class VoxOctreeError(ValueError):
    """Base class for errors raised by voxoctree."""


class ShapeMismatchError(VoxOctreeError):
    """A column or section does not have the required number of entries."""

    def __init__(self, message: str, expected: int, actual: int):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class PaletteOverflowError(VoxOctreeError):
    """A column holds more distinct block types than a 16-bit index can address."""

    def __init__(self, count: int, limit: int):
        super().__init__(
            f"Column contains {count} distinct block types, "
            f"palette supports at most {limit}"
        )
        self.count = count
        self.limit = limit
