import struct

import pytest

from minifat.errors import (
    ClusterChainError,
    InvalidBootSectorError,
    InvalidFatError,
    VolumeIOError,
)
from minifat.volume import Fat32Volume

SECTOR = 512
EOC = 0x0FFFFFFF
BAD = 0x0FFFFFF7
TOTAL_SECTORS = 8


def boot_sector(fs_type=b"FAT32   ", signature=0xAA55, sectors_per_fat=1):
    sector = bytearray(SECTOR)
    struct.pack_into("<H", sector, 11, SECTOR)
    sector[13] = 1
    struct.pack_into("<H", sector, 14, 1)
    sector[16] = 1
    struct.pack_into("<I", sector, 36, sectors_per_fat)
    struct.pack_into("<I", sector, 44, 2)
    sector[82:90] = fs_type
    struct.pack_into("<H", sector, 510, signature)
    return bytes(sector)


def fat_sector():
    entries = [0x0FFFFFF8, EOC, EOC, 4, EOC, BAD, 7, BAD]
    entries += [0] * (SECTOR // 4 - len(entries))
    return struct.pack(f"<{len(entries)}I", *entries)


def cluster_payload(number):
    return bytes([number]) * SECTOR


def make_image():
    image = boot_sector() + fat_sector()
    for number in range(2, TOTAL_SECTORS):
        image += cluster_payload(number)
    return image


@pytest.fixture
def volume():
    return Fat32Volume.from_bytes(make_image())


def test_parses_boot_sector(volume):
    assert volume.boot_sector.root_cluster == 2
    assert volume.boot_sector.cluster_size() == SECTOR
    assert volume.device_data == make_image()


def test_fat_table_loaded(volume):
    assert len(volume.fat_table) == SECTOR // 4
    assert volume.fat_table.get_entry(3) == 4
    assert volume.fat_table.is_bad_cluster(5) is True


def test_cluster_chain_single(volume):
    assert volume.cluster_chain(2).clusters == (2,)


def test_cluster_chain_multiple(volume):
    chain = volume.cluster_chain(3)
    assert list(chain) == [3, 4]
    assert chain.total_size(volume.boot_sector.cluster_size()) == 2 * SECTOR


def test_cluster_chain_bad(volume):
    with pytest.raises(ClusterChainError):
        volume.cluster_chain(6)


def test_cluster_chain_invalid_start(volume):
    with pytest.raises(ClusterChainError):
        volume.cluster_chain(1)


@pytest.mark.parametrize("number", range(2, TOTAL_SECTORS))
def test_read_cluster_round_trip(volume, number):
    assert volume.read_cluster(number) == cluster_payload(number)


def test_read_cluster_past_end(volume):
    with pytest.raises(VolumeIOError):
        volume.read_cluster(TOTAL_SECTORS)


def test_read_cluster_below_data_area(volume):
    with pytest.raises(VolumeIOError):
        volume.read_cluster(0)


def test_fat_out_of_bounds():
    image = boot_sector(sectors_per_fat=100) + fat_sector()
    with pytest.raises(InvalidFatError):
        Fat32Volume.from_bytes(image)


def test_rejects_non_fat32():
    image = boot_sector(fs_type=b"FAT16   ") + fat_sector()
    with pytest.raises(InvalidBootSectorError):
        Fat32Volume.from_bytes(image)


def test_rejects_bad_signature():
    image = boot_sector(signature=0x1234) + fat_sector()
    with pytest.raises(InvalidBootSectorError):
        Fat32Volume.from_bytes(image)


def test_rejects_short_image():
    with pytest.raises(InvalidBootSectorError):
        Fat32Volume.from_bytes(boot_sector()[:100])