import numpy as np
import pytest

from voxoctree.blocks import Block


SECTION_VOLUME = 16 * 16 * 16


def offset(x, y, z):
    return x + z * 16 + y * 256


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def layered_column():
    """Bedrock floor, stone, dirt, a grass layer and air above."""
    sections = []
    for s in range(24):
        section = []
        for y in range(16):
            height = s * 16 + y
            if height == 0:
                block = Block.BEDROCK
            elif height < 60:
                block = Block.STONE
            elif height < 63:
                block = Block.DIRT
            elif height == 63:
                block = Block.GRASS
            else:
                block = Block.AIR
            section.extend([block] * 256)
        sections.append(section)

    # Scatter some ore and a tree trunk so a few regions are mixed
    sections[1][offset(3, 5, 7)] = Block.DIAMOND_ORE
    sections[2][offset(9, 1, 2)] = Block.COAL_ORE
    for y in range(0, 6):
        sections[4][offset(8, y, 8)] = Block.LOG
    return sections


@pytest.fixture
def random_column(rng):
    return rng.integers(0, 6, size=(24, SECTION_VOLUME)).tolist()
