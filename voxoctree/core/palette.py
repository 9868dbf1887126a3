"""
BlockPalette - Column Block Palette
===================================

Maps the block types found in a chunk column to compact palette indices.

Indices are handed out in first-occurrence order while scanning the
column bottom to top, and within each section in storage order. Columns
with at most 255 distinct block types use 8-bit indices; anything larger
switches the whole column to 16-bit indices.
"""

from itertools import chain
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Sequence

import numpy as np

from voxoctree.core.errors import PaletteOverflowError


# Largest palette that still fits 8-bit indices
NARROW_LIMIT = 255
# Number of distinct values a 16-bit index can address
MAX_PALETTE_SIZE = 1 << 16


def _as_values(section) -> Iterable[Hashable]:
    """Iterate a section as plain Python values."""
    if isinstance(section, np.ndarray):
        return section.ravel().tolist()
    return section


class BlockPalette:
    """
    Bidirectional mapping between palette indices and block types.

    Built once per column with :meth:`build` and never modified afterwards.
    Block types can be any hashable value with a stable 16-bit code
    (``int(block)``), such as :class:`voxoctree.blocks.Block`.
    """

    __slots__ = ('_blocks', '_indices', '_dtype')

    def __init__(self, blocks: Sequence[Hashable]):
        """
        Create a palette from an ordered list of distinct block types.

        Args:
            blocks: Block types; a block's position is its palette index

        Raises:
            PaletteOverflowError: If there are more than 65536 blocks
            ValueError: If the list contains duplicates
        """
        blocks = tuple(blocks)
        if len(blocks) > MAX_PALETTE_SIZE:
            raise PaletteOverflowError(len(blocks), MAX_PALETTE_SIZE)

        indices = {block: i for i, block in enumerate(blocks)}
        if len(indices) != len(blocks):
            raise ValueError("Palette blocks must be distinct")

        self._blocks = blocks
        self._indices = indices
        self._dtype = np.dtype(np.uint16 if len(blocks) > NARROW_LIMIT else np.uint8)

    @classmethod
    def build(cls, sections: Iterable[Iterable[Hashable]]) -> 'BlockPalette':
        """
        Build the palette for a column.

        Args:
            sections: Sections in bottom-to-top order, each a flat sequence
                of block types in storage order

        Returns:
            New BlockPalette

        Raises:
            PaletteOverflowError: If the column holds more than 65536
                distinct block types
        """
        # dict preserves insertion order, so keys are in first-occurrence order
        seen = dict.fromkeys(chain.from_iterable(_as_values(s) for s in sections))
        return cls(list(seen))

    @property
    def dtype(self) -> np.dtype:
        """Numpy dtype used for indices (uint8 or uint16)."""
        return self._dtype

    @property
    def width(self) -> int:
        """Index width in bits."""
        return self._dtype.itemsize * 8

    @property
    def is_wide(self) -> bool:
        return self._dtype == np.uint16

    @property
    def blocks(self) -> List[Hashable]:
        return list(self._blocks)

    def resolve(self, index: int) -> Hashable:
        """Get the block type for a palette index."""
        return self._blocks[index]

    def index_of(self, block: Hashable) -> int:
        """Get the palette index of a block type."""
        return self._indices[block]

    def translate(self, section) -> np.ndarray:
        """
        Convert a section of block types into palette indices.

        Args:
            section: Flat sequence of block types

        Returns:
            1D numpy array of indices with this palette's dtype
        """
        values = _as_values(section)
        return np.fromiter(map(self._indices.__getitem__, values),
                           dtype=self._dtype, count=len(values))

    def codes(self) -> np.ndarray:
        """Get the 16-bit block code of every palette entry, in index order."""
        return np.array([int(b) for b in self._blocks], dtype=np.uint16)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize palette to dictionary."""
        return {
            'width': self.width,
            'blocks': self.codes().tolist(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], registry=int) -> 'BlockPalette':
        """
        Deserialize palette from dictionary.

        Args:
            data: Dictionary produced by :meth:`to_dict`
            registry: Callable mapping a 16-bit code to a block type
        """
        palette = cls([registry(code) for code in data['blocks']])
        width = data.get('width')
        if width is not None and width != palette.width:
            raise ValueError(f"Palette width mismatch: stored {width}, computed {palette.width}")
        return palette

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._blocks)

    def __contains__(self, block) -> bool:
        return block in self._indices

    def __eq__(self, other) -> bool:
        if not isinstance(other, BlockPalette):
            return NotImplemented
        return self._blocks == other._blocks

    def __hash__(self) -> int:
        return hash(self._blocks)

    def __repr__(self) -> str:
        return f"BlockPalette(size={len(self)}, width={self.width})"
