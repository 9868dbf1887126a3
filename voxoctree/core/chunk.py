"""
ChunkColumn - Compressed Chunk Column
=====================================

A chunk column is a vertical stack of 24 sections of 16x16x16 blocks.
Building a column scans every section once to build a shared
:class:`BlockPalette`, then compresses each section into its own octree.
Once built, a column is immutable and safe to read from multiple threads.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence, Tuple

import numpy as np

from voxoctree.blocks import Block, block_from_code
from voxoctree.core.errors import ShapeMismatchError
from voxoctree.core.octree import (
    DenseLeaf, Node, UniformLeaf, build_node, get_index, iter_nodes, node_count,
    node_from_dict, node_nbytes, node_to_dict, to_array,
)
from voxoctree.core.palette import BlockPalette
from voxoctree.core.position import (
    COLUMN_HEIGHT, SECTION_COUNT, SECTION_SIZE, BlockPosition, unpack,
)

logger = logging.getLogger(__name__)

SECTION_VOLUME = SECTION_SIZE ** 3

# Code-to-block converters recorded by ChunkColumn.to_dict
REGISTRIES = {
    'block': block_from_code,
    'int': int,
}


def _section_length(section) -> int:
    if isinstance(section, np.ndarray):
        return section.size
    return len(section)


def _check_indices(root: Node, size: int, section_index: int):
    """Reject trees that reference indices outside a palette of ``size`` entries."""
    for node in iter_nodes(root):
        if isinstance(node, UniformLeaf):
            bad = not 0 <= node.index < size
        elif isinstance(node, DenseLeaf):
            bad = int(node.indices.max()) >= size
        else:
            continue
        if bad:
            raise ValueError(
                f"Section {section_index} references a palette index outside [0, {size})"
            )


def validate_sections(sections: Sequence) -> List:
    """
    Check that a column has 24 sections of 4096 blocks each.

    Returns:
        The sections as a list

    Raises:
        ShapeMismatchError: If the section count or any section length is wrong
    """
    sections = list(sections)
    if len(sections) != SECTION_COUNT:
        raise ShapeMismatchError(
            f"Column must have {SECTION_COUNT} sections, got {len(sections)}",
            expected=SECTION_COUNT, actual=len(sections)
        )

    for i, section in enumerate(sections):
        length = _section_length(section)
        if length != SECTION_VOLUME:
            raise ShapeMismatchError(
                f"Section {i} must have {SECTION_VOLUME} blocks, got {length}",
                expected=SECTION_VOLUME, actual=length
            )

    return sections


@dataclass(frozen=True)
class ChunkColumn:
    """
    Octree-compressed chunk column.

    Attributes:
        palette: Palette shared by every section
        roots: Octree root of each section, bottom to top
    """

    palette: BlockPalette
    roots: Tuple[Node, ...]

    def __post_init__(self):
        if len(self.roots) != SECTION_COUNT:
            raise ShapeMismatchError(
                f"Column must have {SECTION_COUNT} section roots, got {len(self.roots)}",
                expected=SECTION_COUNT, actual=len(self.roots)
            )

    @classmethod
    def build(cls, sections: Sequence, max_workers: Optional[int] = None) -> 'ChunkColumn':
        """Build a column; see :func:`build_column`."""
        return build_column(sections, max_workers=max_workers)

    @classmethod
    def from_codes(cls, codes, registry: Optional[Callable[[int], Hashable]] = None,
                   max_workers: Optional[int] = None) -> 'ChunkColumn':
        """
        Build a column from raw 16-bit block codes.

        Args:
            codes: ``24 * 4096`` codes, flat or shaped ``(24, 4096)``, bottom
                section first
            registry: Callable mapping a code to a block type
                (default: :func:`voxoctree.blocks.block_from_code`)
            max_workers: Worker threads for section builds

        Returns:
            New ChunkColumn
        """
        if registry is None:
            registry = block_from_code

        codes = np.asarray(codes)
        expected = SECTION_COUNT * SECTION_VOLUME
        if codes.size != expected:
            raise ShapeMismatchError(
                f"Column must have {expected} block codes, got {codes.size}",
                expected=expected, actual=codes.size
            )

        rows = codes.reshape(SECTION_COUNT, SECTION_VOLUME).tolist()
        blocks = {code: registry(code) for code in np.unique(codes).tolist()}
        sections = [[blocks[code] for code in row] for row in rows]
        return build_column(sections, max_workers=max_workers)

    @property
    def width(self) -> int:
        """Palette index width in bits (8 or 16)."""
        return self.palette.width

    def get_voxel(self, section_index: int, x: int, y: int, z: int) -> Hashable:
        """
        Get the block type at a section-local position.

        Args:
            section_index: Section index, 0 (bottom) to 23 (top)
            x, y, z: Coordinates inside the section, each in [0, 15]

        Returns:
            Block type
        """
        if not 0 <= section_index < SECTION_COUNT:
            raise IndexError(f"Section index out of range: {section_index}")
        index = get_index(self.roots[section_index], x, y, z, SECTION_SIZE)
        return self.palette.resolve(index)

    def get_packed(self, section_index: int, key: int) -> Hashable:
        """Get the block type at a packed section-local position."""
        return self.get_voxel(section_index, *unpack(key))

    def get_block(self, x: int, y: int, z: int) -> Hashable:
        """
        Get the block type at a column position.

        Args:
            x, z: Horizontal coordinates in [0, 15]
            y: Height above the column floor in [0, 383]
        """
        pos = BlockPosition(x, y, z)
        if not pos.is_valid():
            raise IndexError(f"Position outside column: {pos}")
        return self.get_voxel(pos.section, *pos.local)

    def to_codes(self) -> np.ndarray:
        """
        Decompress the column into raw block codes.

        Returns:
            ``(24, 4096)`` uint16 array in section storage order
        """
        codes = self.palette.codes()
        return np.stack([
            codes[to_array(root, SECTION_SIZE, self.palette.dtype)]
            for root in self.roots
        ])

    def to_sections(self) -> List[List[Hashable]]:
        """Decompress the column into 24 lists of block types."""
        blocks = self.palette.blocks
        return [
            [blocks[i] for i in to_array(root, SECTION_SIZE, self.palette.dtype).tolist()]
            for root in self.roots
        ]

    @property
    def nbytes(self) -> int:
        """Approximate memory used by the palette and all section trees."""
        itemsize = self.palette.dtype.itemsize
        trees = sum(node_nbytes(root, itemsize) for root in self.roots)
        return trees + len(self.palette) * 2

    def stats(self) -> Dict[str, int]:
        """Get node totals and size figures for the column."""
        totals = {'uniform': 0, 'dense': 0, 'branch': 0}
        for root in self.roots:
            for kind, count in node_count(root).items():
                totals[kind] += count
        totals['palette_size'] = len(self.palette)
        totals['width'] = self.width
        totals['nbytes'] = self.nbytes
        return totals

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the column to a dictionary."""
        registry = 'block' if all(isinstance(b, Block) for b in self.palette) else 'int'
        return {
            'registry': registry,
            'palette': self.palette.to_dict(),
            'sections': [node_to_dict(root) for root in self.roots],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any],
                  registry: Optional[Callable[[int], Hashable]] = None) -> 'ChunkColumn':
        """
        Deserialize a column from a dictionary.

        Args:
            data: Dictionary produced by :meth:`to_dict`
            registry: Callable mapping a code to a block type
                (default: the registry named in ``data``, falling back to
                :func:`voxoctree.blocks.block_from_code`)

        Raises:
            ValueError: If the registry name is unknown or a section stores
                an index outside the palette
        """
        if registry is None:
            name = data.get('registry', 'block')
            if name not in REGISTRIES:
                raise ValueError(f"Unknown block registry: {name}")
            registry = REGISTRIES[name]

        palette = BlockPalette.from_dict(data['palette'], registry)
        roots = tuple(node_from_dict(section, palette.dtype) for section in data['sections'])
        for i, root in enumerate(roots):
            _check_indices(root, len(palette), i)
        return cls(palette, roots)

    def __len__(self) -> int:
        return SECTION_COUNT

    def __repr__(self) -> str:
        return f"ChunkColumn(palette_size={len(self.palette)}, width={self.width}, height={COLUMN_HEIGHT})"


def build_column(sections: Sequence, max_workers: Optional[int] = None) -> ChunkColumn:
    """
    Compress a chunk column.

    Args:
        sections: 24 sections, bottom to top, each a flat sequence of 4096
            block types with ``(x, y, z)`` at ``x + z * 16 + y * 256``
        max_workers: If greater than 1, translate and build sections on a
            thread pool of this size; otherwise build sequentially

    Returns:
        New ChunkColumn

    Raises:
        ShapeMismatchError: If the column is not 24 sections of 4096 blocks
        PaletteOverflowError: If the column holds more than 65536 distinct
            block types
    """
    sections = validate_sections(sections)
    palette = BlockPalette.build(sections)
    logger.debug("Built palette with %d block types (%d-bit indices)",
                 len(palette), palette.width)

    def build_section(section) -> Node:
        return build_node(palette.translate(section), SECTION_SIZE)

    if max_workers and max_workers > 1:
        logger.debug("Building %d sections on %d threads", SECTION_COUNT, max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            roots = list(executor.map(build_section, sections))
    else:
        roots = [build_section(section) for section in sections]

    column = ChunkColumn(palette, tuple(roots))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built chunk column: %s", column.stats())
    return column
