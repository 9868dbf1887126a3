import numpy as np
import pytest

from voxoctree.blocks import Block
from voxoctree.core.errors import PaletteOverflowError, VoxOctreeError
from voxoctree.core.palette import BlockPalette


def test_indices_follow_first_occurrence():
    palette = BlockPalette.build([[5, 3, 5, 1], [3, 7]])
    assert palette.blocks == [5, 3, 1, 7]
    assert [palette.index_of(b) for b in (5, 3, 1, 7)] == [0, 1, 2, 3]
    assert palette.resolve(3) == 7


def test_order_is_not_sorted_by_code():
    palette = BlockPalette.build([[Block.DIRT, Block.AIR, Block.STONE]])
    assert palette.index_of(Block.DIRT) == 0
    assert palette.index_of(Block.AIR) == 1
    assert palette.codes().tolist() == [3, 0, 1]


def test_numpy_sections():
    sections = np.array([[2, 2, 9], [9, 4, 2]], dtype=np.uint16)
    palette = BlockPalette.build(sections)
    assert palette.blocks == [2, 9, 4]


@pytest.mark.parametrize("count, width, dtype", [
    (1, 8, np.uint8),
    (255, 8, np.uint8),
    (256, 16, np.uint16),
    (65536, 16, np.uint16),
])
def test_width_boundary(count, width, dtype):
    palette = BlockPalette(range(count))
    assert len(palette) == count
    assert palette.width == width
    assert palette.dtype == dtype
    assert palette.is_wide == (width == 16)


def test_overflow():
    with pytest.raises(PaletteOverflowError) as info:
        BlockPalette.build([range(65537)])
    assert info.value.count == 65537
    assert isinstance(info.value, VoxOctreeError)


def test_duplicates_rejected():
    with pytest.raises(ValueError):
        BlockPalette([1, 2, 1])


def test_translate():
    palette = BlockPalette.build([[Block.STONE, Block.AIR]])
    indices = palette.translate([Block.AIR, Block.STONE, Block.AIR])
    assert indices.dtype == np.uint8
    assert indices.tolist() == [1, 0, 1]


def test_translate_wide():
    palette = BlockPalette(range(300))
    indices = palette.translate(np.array([299, 0, 256]))
    assert indices.dtype == np.uint16
    assert indices.tolist() == [299, 0, 256]


def test_out_of_domain_lookups_fail():
    palette = BlockPalette([Block.STONE])
    with pytest.raises(IndexError):
        palette.resolve(1)
    with pytest.raises(KeyError):
        palette.index_of(Block.DIRT)


def test_container_protocol():
    palette = BlockPalette([Block.GRASS, Block.DIRT])
    assert Block.GRASS in palette
    assert Block.SAND not in palette
    assert list(palette) == [Block.GRASS, Block.DIRT]


def test_dict_round_trip():
    palette = BlockPalette([Block.WATER, Block.SAND, Block.GRAVEL])
    data = palette.to_dict()
    assert data == {'width': 8, 'blocks': [9, 12, 13]}

    restored = BlockPalette.from_dict(data, Block)
    assert restored == palette
    assert restored.resolve(1) is Block.SAND


def test_from_dict_width_mismatch():
    with pytest.raises(ValueError):
        BlockPalette.from_dict({'width': 16, 'blocks': [1, 2]})
