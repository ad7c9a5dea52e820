"""Cluster chains followed through the FAT."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .errors import ClusterChainError
from .fat_table import BAD_CLUSTER, END_OF_CHAIN, FatTable


@dataclass(frozen=True)
class ClusterChain:
    """The ordered cluster numbers holding one file's or directory's data."""

    clusters: tuple[int, ...]

    @classmethod
    def from_fat(cls, fat_table: FatTable, start_cluster: int) -> ClusterChain:
        """Follow the FAT from ``start_cluster`` to the end-of-chain marker."""
        if start_cluster < 2:
            raise ClusterChainError("Invalid cluster number (must be >= 2)")

        limit = len(fat_table)
        clusters: list[int] = []
        current = start_cluster
        while True:
            if len(clusters) >= limit:
                raise ClusterChainError("Cluster chain too long or circular")
            clusters.append(current)
            following = fat_table.get_entry(current)
            if following >= END_OF_CHAIN:
                break
            if following == BAD_CLUSTER:
                raise ClusterChainError("Bad cluster in chain")
            if following < 2:
                raise ClusterChainError("Invalid next cluster number")
            current = following
        return cls(tuple(clusters))

    def __len__(self) -> int:
        return len(self.clusters)

    def __iter__(self) -> Iterator[int]:
        return iter(self.clusters)

    def total_size(self, cluster_size: int) -> int:
        """Bytes spanned by the chain for clusters of ``cluster_size`` bytes."""
        return len(self.clusters) * cluster_size