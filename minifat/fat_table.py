"""The FAT32 file allocation table."""

from __future__ import annotations

import struct
from collections.abc import Sequence

from .errors import InvalidFatError

ENTRY_MASK = 0x0FFFFFFF
END_OF_CHAIN = 0x0FFFFFF8
BAD_CLUSTER = 0x0FFFFFF7
FREE_CLUSTER = 0


class FatTable:
    """Table of 28-bit cluster links, one entry per cluster."""

    def __init__(self, entries: Sequence[int]) -> None:
        self._entries = tuple(entries)

    @classmethod
    def from_bytes(cls, data: bytes) -> FatTable:
        """Parse little-endian 32-bit entries, keeping their lower 28 bits."""
        if len(data) % 4:
            raise InvalidFatError("FAT table size must be multiple of 4")
        return cls(value & ENTRY_MASK for (value,) in struct.iter_unpack("<I", bytes(data)))

    def _in_bounds(self, cluster: int) -> bool:
        return 0 <= cluster < len(self._entries)

    def get_entry(self, cluster: int) -> int:
        """Return the FAT value for ``cluster``: the next cluster or a marker."""
        if not self._in_bounds(cluster):
            raise InvalidFatError("Cluster out of FAT bounds")
        return self._entries[cluster]

    def is_end_of_chain(self, cluster: int) -> bool:
        """True if ``cluster`` ends its chain or lies outside the table."""
        if not self._in_bounds(cluster):
            return True
        return self._entries[cluster] >= END_OF_CHAIN

    def is_bad_cluster(self, cluster: int) -> bool:
        """True if ``cluster`` is marked bad or lies outside the table."""
        if not self._in_bounds(cluster):
            return True
        return self._entries[cluster] == BAD_CLUSTER

    def is_free_cluster(self, cluster: int) -> bool:
        """True if ``cluster`` is inside the table and unallocated."""
        if not self._in_bounds(cluster):
            return False
        return self._entries[cluster] == FREE_CLUSTER

    def __len__(self) -> int:
        return len(self._entries)