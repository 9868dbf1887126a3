"""
Block Positions - Coordinate Packing
====================================

Section-local and column-local block coordinates.

A local coordinate is packed into a single integer key laid out as
``y << 16 | x << 8 | z`` so each axis can be pulled out with a shift and
a mask on the lookup hot path.
"""

from typing import NamedTuple, Tuple


SECTION_SIZE = 16
SECTION_COUNT = 24
COLUMN_HEIGHT = SECTION_SIZE * SECTION_COUNT


def pack(x: int, y: int, z: int) -> int:
    """
    Pack a section-local coordinate into a single key.

    Coordinates must lie in [0, 15]; this is not checked.
    """
    return y << 16 | x << 8 | z


def unpack(key: int) -> Tuple[int, int, int]:
    """Unpack a key produced by :func:`pack` into ``(x, y, z)``."""
    return (key >> 8) & 0xff, key >> 16, key & 0xff


class LocalPosition(NamedTuple):
    """Block position inside a single 16x16x16 section."""
    x: int
    y: int
    z: int

    @property
    def key(self) -> int:
        return pack(self.x, self.y, self.z)

    @classmethod
    def from_key(cls, key: int) -> 'LocalPosition':
        return cls(*unpack(key))

    def __repr__(self) -> str:
        return f"LocalPosition(x={self.x}, y={self.y}, z={self.z})"


class BlockPosition(NamedTuple):
    """
    Block position inside a chunk column.

    Attributes:
        x: Column-local x in [0, 15]
        y: Height above the column floor in [0, 383]
        z: Column-local z in [0, 15]
    """
    x: int
    y: int
    z: int

    @property
    def section(self) -> int:
        """Index of the section containing this position (0 = bottom)."""
        return self.y >> 4

    @property
    def local(self) -> LocalPosition:
        """Position relative to the containing section."""
        return LocalPosition(self.x, self.y & 0x0f, self.z)

    def is_valid(self) -> bool:
        """Check if the position lies inside a column."""
        return (0 <= self.x < SECTION_SIZE and
                0 <= self.y < COLUMN_HEIGHT and
                0 <= self.z < SECTION_SIZE)
