import itertools

import numpy as np
import pytest

from voxoctree.core.octree import (
    Branch, DenseLeaf, UniformLeaf, build_node, get_index, iter_nodes, lookup,
    node_count, node_from_dict, node_nbytes, node_to_dict, octant_index,
    octant_origin, to_array,
)
from voxoctree.core.position import pack


def cube(size, fill=0, dtype=np.uint8):
    return np.full((size, size, size), fill, dtype=dtype)


def test_uniform_section_is_single_leaf():
    assert build_node(np.zeros(4096, dtype=np.uint8)) == UniformLeaf(0)


def test_octant_origin_inverts_octant_index():
    for octant in range(8):
        x, y, z = octant_origin(octant, 8)
        assert octant_index(x, y, z, 8) == octant
        assert octant_index(x + 7, y + 7, z + 7, 8) == octant


def test_octant_bits():
    assert octant_index(8, 0, 0, 8) == 1
    assert octant_index(0, 0, 8, 8) == 2
    assert octant_index(0, 8, 0, 8) == 4


def test_corner_cube_of_other_block():
    grid = cube(16, fill=1)
    grid[:4, :4, :4] = 2
    root = build_node(grid)

    assert isinstance(root, Branch)
    assert root.children[1:] == (UniformLeaf(1),) * 7

    mid = root.children[0]
    assert isinstance(mid, Branch)
    assert mid.children[0] == UniformLeaf(2)
    assert mid.children[1:] == (UniformLeaf(1),) * 7


def test_mixed_corner_becomes_dense_leaf():
    grid = cube(16, fill=1)
    grid[:4, :4, :4] = 2
    grid[0, 0, 0] = 1
    root = build_node(grid)

    leaf = root.children[0].children[0]
    assert isinstance(leaf, DenseLeaf)
    assert leaf.indices.dtype == np.uint8
    assert leaf.indices.shape == (64,)
    assert leaf.indices[0] == 1
    assert (leaf.indices[1:] == 2).all()
    assert node_count(root) == {'uniform': 14, 'dense': 1, 'branch': 2}


def test_dense_leaf_row_major_order():
    grid = np.arange(64, dtype=np.uint8).reshape(4, 4, 4)
    leaf = build_node(grid, size=4)
    assert isinstance(leaf, DenseLeaf)
    assert leaf.indices.tolist() == list(range(64))
    assert leaf.get(1, 2, 3) == 1 + 3 * 4 + 2 * 16


def test_dense_leaf_is_read_only():
    leaf = build_node(np.arange(64, dtype=np.uint8), size=4)
    with pytest.raises(ValueError):
        leaf.indices[0] = 5


def test_dense_leaves_only_at_minimal_size():
    rng = np.random.default_rng(7)
    root = build_node(rng.integers(0, 3, size=4096).astype(np.uint8))

    def walk(node, size):
        if isinstance(node, DenseLeaf):
            assert size == 4
        elif isinstance(node, Branch):
            assert len(node.children) == 8
            for child in node.children:
                walk(child, size // 2)

    walk(root, 16)


def test_lookup_matches_input(rng):
    flat = rng.integers(0, 4, size=4096).astype(np.uint8)
    flat[:2048] = 0
    root = build_node(flat)

    for x, y, z in itertools.product(range(16), repeat=3):
        expected = flat[x + z * 16 + y * 256]
        assert get_index(root, x, y, z) == expected
        assert lookup(root, pack(x, y, z)) == expected


def test_uniform_leaf_ignores_coordinates():
    assert get_index(UniformLeaf(3), 15, 15, 15) == 3


@pytest.mark.parametrize("size", [4, 8, 32])
def test_other_sizes(rng, size):
    flat = rng.integers(0, 2, size=size ** 3).astype(np.uint16)
    root = build_node(flat, size=size)
    assert to_array(root, size, np.uint16).tolist() == flat.tolist()
    assert get_index(root, size - 1, size - 1, size - 1, size) == flat[-1]


@pytest.mark.parametrize("size", [0, 2, 6, 12])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        build_node(np.zeros(max(size, 1) ** 3), size=size)


def test_size_mismatch():
    with pytest.raises(ValueError):
        build_node(np.zeros(4095, dtype=np.uint8))


def test_build_is_deterministic(rng):
    flat = rng.integers(0, 3, size=4096).astype(np.uint8)
    assert build_node(flat) == build_node(flat.copy())
    assert node_to_dict(build_node(flat)) == node_to_dict(build_node(flat.copy()))


def test_to_array_inverts_build(rng):
    flat = rng.integers(0, 300, size=4096).astype(np.uint16)
    flat[:1024] = 7
    assert np.array_equal(to_array(build_node(flat), 16, np.uint16), flat)


def test_dict_round_trip(rng):
    flat = rng.integers(0, 3, size=4096).astype(np.uint8)
    flat[2048:] = 1
    root = build_node(flat)
    assert node_from_dict(node_to_dict(root), np.uint8) == root


def test_node_from_dict_rejects_bad_data():
    with pytest.raises(ValueError):
        node_from_dict({'dense': [0] * 63})
    with pytest.raises(ValueError):
        node_from_dict({'branch': [{'uniform': 0}] * 7})
    with pytest.raises(ValueError):
        node_from_dict({'leaf': 0})


def test_iter_nodes_depth_first():
    grid = cube(8)
    grid[0, 0, 0] = 1
    root = build_node(grid, size=8)
    nodes = list(iter_nodes(root))
    assert nodes[0] is root
    assert isinstance(nodes[1], DenseLeaf)
    assert len(nodes) == 9


def test_node_nbytes():
    assert node_nbytes(UniformLeaf(0)) == 1
    assert node_nbytes(UniformLeaf(0), itemsize=2) == 2

    grid = cube(8)
    grid[0, 0, 0] = 1
    root = build_node(grid, size=8)
    assert node_nbytes(root) == 8 * 8 + 64 + 7
