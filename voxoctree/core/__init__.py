"""
voxoctree Core Module
=====================

Palette construction, octree nodes and chunk columns.
"""

from voxoctree.core.chunk import ChunkColumn, build_column
from voxoctree.core.errors import PaletteOverflowError, ShapeMismatchError, VoxOctreeError
from voxoctree.core.octree import Branch, DenseLeaf, Node, UniformLeaf, build_node, get_index
from voxoctree.core.palette import BlockPalette
from voxoctree.core.position import BlockPosition, LocalPosition, pack, unpack

__all__ = [
    'BlockPalette',
    'BlockPosition',
    'Branch',
    'ChunkColumn',
    'DenseLeaf',
    'LocalPosition',
    'Node',
    'PaletteOverflowError',
    'ShapeMismatchError',
    'UniformLeaf',
    'VoxOctreeError',
    'build_column',
    'build_node',
    'get_index',
    'pack',
    'unpack',
]
