"""
Octree - Sparse Section Storage
===============================

Compresses a cube of palette indices into an octree.

A node is one of three shapes:

- ``UniformLeaf``: the whole cube holds a single index
- ``DenseLeaf``: a non-uniform 4x4x4 cube, stored as 64 indices
- ``Branch``: eight children, one per octant of half the edge

Index arrays use the same row-major layout as sections: ``(x, y, z)`` lives
at offset ``x + z * size + y * size * size``, so a flat array reshapes to a
``[y, z, x]`` grid.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple, Union

import numpy as np

from voxoctree.core.position import SECTION_SIZE, unpack


# Edge length below which cubes are no longer subdivided
MINIMAL_NODE_SIZE = 4
MINIMAL_NODE_VOLUME = MINIMAL_NODE_SIZE ** 3

# Bytes counted per child reference when estimating branch size
POINTER_SIZE = 8


@dataclass(frozen=True)
class UniformLeaf:
    """Cube where every block has the same palette index."""
    index: int


@dataclass(frozen=True, eq=False)
class DenseLeaf:
    """Non-uniform 4x4x4 cube stored verbatim in row-major order."""
    indices: np.ndarray

    def get(self, x: int, y: int, z: int) -> int:
        return int(self.indices[x + z * MINIMAL_NODE_SIZE + y * MINIMAL_NODE_SIZE * MINIMAL_NODE_SIZE])

    def __eq__(self, other) -> bool:
        if not isinstance(other, DenseLeaf):
            return NotImplemented
        return (self.indices.dtype == other.indices.dtype and
                np.array_equal(self.indices, other.indices))

    def __hash__(self) -> int:
        return hash(self.indices.tobytes())


@dataclass(frozen=True)
class Branch:
    """Cube split into eight octants, ordered by :func:`octant_index`."""
    children: Tuple['Node', ...]


Node = Union[UniformLeaf, DenseLeaf, Branch]


def octant_index(x: int, y: int, z: int, half: int) -> int:
    """
    Get the child slot for a position inside a branch.

    Bit 0 selects the upper x half, bit 1 the upper z half and bit 2 the
    upper y half.
    """
    return int(x >= half) | int(z >= half) << 1 | int(y >= half) << 2


def octant_origin(octant: int, half: int) -> Tuple[int, int, int]:
    """Get the ``(x, y, z)`` corner of a child slot; inverse of :func:`octant_index`."""
    return (octant & 1) * half, (octant >> 2) * half, ((octant >> 1) & 1) * half


def _check_size(size: int):
    if size < MINIMAL_NODE_SIZE or size & (size - 1):
        raise ValueError(f"Node size must be a power of two >= {MINIMAL_NODE_SIZE}, got {size}")


def build_node(indices, size: int = SECTION_SIZE) -> Node:
    """
    Build an octree from a cube of palette indices.

    Args:
        indices: Flat array of ``size ** 3`` indices in row-major order, or
            a ``(size, size, size)`` array indexed ``[y, z, x]``
        size: Edge length of the cube, a power of two >= 4

    Returns:
        Root node of the tree

    Raises:
        ValueError: If size is invalid or does not match the array
    """
    _check_size(size)

    grid = np.asarray(indices)
    if grid.shape != (size, size, size):
        if grid.size != size ** 3:
            raise ValueError(f"Expected {size ** 3} indices for size {size}, got {grid.size}")
        grid = grid.reshape(size, size, size)

    return _build(grid, size)


def _build(region: np.ndarray, size: int) -> Node:
    first = region[0, 0, 0]
    # Early exit works per y layer: a mismatch skips the remaining layers,
    # but each layer is compared as a whole
    if all((layer == first).all() for layer in region):
        return UniformLeaf(int(first))

    if size == MINIMAL_NODE_SIZE:
        blocks = region.flatten()
        blocks.setflags(write=False)
        return DenseLeaf(blocks)

    half = size // 2
    children = []
    for octant in range(8):
        x, y, z = octant_origin(octant, half)
        children.append(_build(region[y:y + half, z:z + half, x:x + half], half))

    return Branch(tuple(children))


def get_index(node: Node, x: int, y: int, z: int, size: int = SECTION_SIZE) -> int:
    """
    Get the palette index stored at a position.

    Args:
        node: Root of the tree
        x, y, z: Coordinates relative to the root, each in [0, size)
        size: Edge length of the root cube

    Returns:
        Palette index
    """
    while isinstance(node, Branch):
        size //= 2
        node = node.children[octant_index(x, y, z, size)]
        x, y, z = x % size, y % size, z % size

    if isinstance(node, UniformLeaf):
        return node.index
    return node.get(x, y, z)


def lookup(node: Node, key: int) -> int:
    """Get the palette index at a packed section-local position."""
    x, y, z = unpack(key)
    return get_index(node, x, y, z, SECTION_SIZE)


def iter_nodes(node: Node) -> Iterator[Node]:
    """Iterate over every node of a tree, depth first."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, Branch):
            stack.extend(reversed(current.children))


def node_count(node: Node) -> Dict[str, int]:
    """Count nodes of each kind in a tree."""
    counts = {'uniform': 0, 'dense': 0, 'branch': 0}
    for current in iter_nodes(node):
        if isinstance(current, UniformLeaf):
            counts['uniform'] += 1
        elif isinstance(current, DenseLeaf):
            counts['dense'] += 1
        else:
            counts['branch'] += 1
    return counts


def node_nbytes(node: Node, itemsize: int = 1) -> int:
    """
    Estimate the memory footprint of a tree's payload.

    Args:
        node: Root of the tree
        itemsize: Bytes per palette index (1 or 2)

    Returns:
        Approximate size in bytes
    """
    total = 0
    for current in iter_nodes(node):
        if isinstance(current, UniformLeaf):
            total += itemsize
        elif isinstance(current, DenseLeaf):
            total += MINIMAL_NODE_VOLUME * itemsize
        else:
            total += len(current.children) * POINTER_SIZE
    return total


def to_array(node: Node, size: int = SECTION_SIZE, dtype=np.uint16) -> np.ndarray:
    """
    Expand a tree back into a flat row-major index array.

    Args:
        node: Root of the tree
        size: Edge length of the root cube
        dtype: Dtype of the returned array

    Returns:
        1D array of ``size ** 3`` indices
    """
    _check_size(size)
    grid = np.empty((size, size, size), dtype=dtype)
    _fill(node, grid)
    return grid.reshape(-1)


def _fill(node: Node, region: np.ndarray):
    if isinstance(node, UniformLeaf):
        region[...] = node.index
    elif isinstance(node, DenseLeaf):
        region[...] = node.indices.reshape(region.shape)
    else:
        half = region.shape[0] // 2
        for octant, child in enumerate(node.children):
            x, y, z = octant_origin(octant, half)
            _fill(child, region[y:y + half, z:z + half, x:x + half])


def node_to_dict(node: Node) -> Dict[str, Any]:
    """Serialize a tree to nested dictionaries."""
    if isinstance(node, UniformLeaf):
        return {'uniform': node.index}
    if isinstance(node, DenseLeaf):
        return {'dense': node.indices.tolist()}
    return {'branch': [node_to_dict(child) for child in node.children]}


def node_from_dict(data: Dict[str, Any], dtype=np.uint16) -> Node:
    """
    Deserialize a tree from nested dictionaries.

    Args:
        data: Dictionary produced by :func:`node_to_dict`
        dtype: Index dtype for dense leaves
    """
    if 'uniform' in data:
        return UniformLeaf(int(data['uniform']))

    if 'dense' in data:
        blocks = np.array(data['dense'], dtype=dtype)
        if blocks.shape != (MINIMAL_NODE_VOLUME,):
            raise ValueError(f"Dense leaf needs {MINIMAL_NODE_VOLUME} indices, got {blocks.size}")
        blocks.setflags(write=False)
        return DenseLeaf(blocks)

    if 'branch' in data:
        children = data['branch']
        if len(children) != 8:
            raise ValueError(f"Branch needs 8 children, got {len(children)}")
        return Branch(tuple(node_from_dict(child, dtype) for child in children))

    raise ValueError(f"Unknown node type: {sorted(data)}")
