"""A FAT32 volume image held in memory."""

from __future__ import annotations

from dataclasses import dataclass

from .boot import BootSector
from .cluster import ClusterChain
from .errors import InvalidFatError, VolumeIOError
from .fat_table import FatTable

FIRST_DATA_CLUSTER = 2


@dataclass(frozen=True)
class Fat32Volume:
    """A FAT32 image: its boot sector, its first FAT and its raw bytes."""

    boot_sector: BootSector
    fat_table: FatTable
    device_data: bytes

    @classmethod
    def from_bytes(cls, device_data: bytes) -> Fat32Volume:
        """Parse the boot sector and the first FAT of an image."""
        data = bytes(device_data)
        boot_sector = BootSector.from_bytes(data)
        bytes_per_sector = boot_sector.bytes_per_sector
        fat_start = boot_sector.fat_start_sector() * bytes_per_sector
        fat_size = boot_sector.sectors_per_fat * bytes_per_sector
        if fat_start + fat_size > len(data):
            raise InvalidFatError("FAT table out of bounds")
        fat_table = FatTable.from_bytes(data[fat_start : fat_start + fat_size])
        return cls(boot_sector, fat_table, data)

    def cluster_chain(self, start_cluster: int) -> ClusterChain:
        """The chain of clusters starting at ``start_cluster``."""
        return ClusterChain.from_fat(self.fat_table, start_cluster)

    def read_cluster(self, cluster: int) -> bytes:
        """The raw contents of one data cluster."""
        boot = self.boot_sector
        cluster_size = boot.cluster_size()
        if cluster < FIRST_DATA_CLUSTER:
            raise VolumeIOError("Cluster out of bounds")
        data_start = boot.data_start_sector() * boot.bytes_per_sector
        cluster_offset = (
            (cluster - FIRST_DATA_CLUSTER) * boot.sectors_per_cluster * boot.bytes_per_sector
        )
        offset = data_start + cluster_offset
        if offset + cluster_size > len(self.device_data):
            raise VolumeIOError("Cluster out of bounds")
        return self.device_data[offset : offset + cluster_size]