"""
voxoctree - Octree Compression for Chunk Columns
================================================

Compresses vertical columns of 16x16x16 voxel sections into sparse
octrees with a column-local block palette:

- Palette indices shrink to 8 bits when a column has 255 block types or fewer
- Uniform regions collapse into single leaves
- Point lookups walk at most three branch levels per section

Version: 1.0.0
"""

__version__ = "1.0.0"
__license__ = "MIT"

from voxoctree.blocks import Block
from voxoctree.core.chunk import ChunkColumn, build_column
from voxoctree.core.errors import PaletteOverflowError, ShapeMismatchError, VoxOctreeError
from voxoctree.core.palette import BlockPalette

__all__ = [
    'Block',
    'BlockPalette',
    'ChunkColumn',
    'build_column',
    'PaletteOverflowError',
    'ShapeMismatchError',
    'VoxOctreeError',
    '__version__',
]
