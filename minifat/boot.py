"""FAT32 boot sector parsing."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .errors import InvalidBootSectorError

BOOT_SECTOR_SIZE = 512
BOOT_SIGNATURE = 0xAA55

_LAYOUT = struct.Struct("<3s8sHBHBHHBHHHIIIHHIHH12sBBBI11s8s420sH")


@dataclass(frozen=True)
class BootSector:
    """The fields stored in the first 512 bytes of a FAT32 volume."""

    jmp_boot: bytes
    oem_name: bytes
    bytes_per_sector: int
    sectors_per_cluster: int
    reserved_sector_count: int
    num_fats: int
    root_entry_count: int
    total_sectors_16: int
    media: int
    sectors_per_fat_16: int
    sectors_per_track: int
    num_heads: int
    hidden_sectors: int
    total_sectors_32: int
    sectors_per_fat_32: int
    ext_flags: int
    fat_version: int
    root_cluster: int
    fs_info: int
    backup_boot_sector: int
    reserved: bytes
    drive_number: int
    reserved1: int
    boot_signature: int
    volume_id: int
    volume_label: bytes
    fs_type: bytes
    boot_code: bytes
    boot_signature_end: int

    @classmethod
    def from_bytes(cls, data: bytes) -> BootSector:
        """Parse a boot sector from the start of ``data``."""
        if len(data) < BOOT_SECTOR_SIZE:
            raise InvalidBootSectorError("Boot sector must be at least 512 bytes")
        sector = cls(*_LAYOUT.unpack_from(bytes(data[:BOOT_SECTOR_SIZE])))
        if not sector.fs_type.startswith(b"FAT3"):
            raise InvalidBootSectorError("Not a FAT32 filesystem")
        if sector.boot_signature_end != BOOT_SIGNATURE:
            raise InvalidBootSectorError("Invalid boot sector signature")
        return sector

    @property
    def sectors_per_fat(self) -> int:
        """Sectors occupied by one copy of the FAT."""
        return self.sectors_per_fat_32

    def cluster_size(self) -> int:
        """Size of one cluster in bytes."""
        return self.bytes_per_sector * self.sectors_per_cluster

    def fat_start_sector(self) -> int:
        """First sector of the FAT (the reserved sector count)."""
        return self.reserved_sector_count

    def data_start_sector(self) -> int:
        """First sector of the data area."""
        return self.fat_start_sector() + self.sectors_per_fat_32 * self.num_fats