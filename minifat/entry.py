"""FAT32 directory entries: short 8.3 entries and long file name entries."""

from __future__ import annotations

import dataclasses
import struct
from dataclasses import dataclass

from .errors import DirectoryEntryError

ENTRY_SIZE = 32
FREE_MARKER = 0x00
DELETED_MARKER = 0xE5

ATTR_VOLUME_LABEL = 0x08
ATTR_DIRECTORY = 0x10
ATTR_LONG_NAME = 0x0F

LAST_LONG_ENTRY = 0x40
SEQUENCE_MASK = 0x3F

_PAD = 0x20

_SHORT_LAYOUT = struct.Struct("<11sBBBHHHHHHHI")


def _decode(raw: bytes, what: str) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DirectoryEntryError(f"Invalid UTF-8 in {what}") from exc


@dataclass(frozen=True)
class DirectoryEntry:
    """A 32-byte short-name (8.3) directory entry."""

    name: bytes
    attributes: int
    nt_reserved: int
    creation_time_tenths: int
    creation_time: int
    creation_date: int
    last_access_date: int
    first_cluster_high: int
    last_write_time: int
    last_write_date: int
    first_cluster_low: int
    file_size: int

    @classmethod
    def from_bytes(cls, data: bytes) -> DirectoryEntry:
        """Parse an entry from the first 32 bytes of ``data``.

        Free and deleted slots are rejected with :class:`DirectoryEntryError`.
        """
        if len(data) < ENTRY_SIZE:
            raise DirectoryEntryError("Directory entry must be at least 32 bytes")
        entry = cls(*_SHORT_LAYOUT.unpack_from(bytes(data[:ENTRY_SIZE])))
        if entry.name[0] in (FREE_MARKER, DELETED_MARKER):
            raise DirectoryEntryError("Empty or deleted entry")
        return entry

    def is_directory(self) -> bool:
        """True if the directory attribute is set."""
        return bool(self.attributes & ATTR_DIRECTORY)

    def is_file(self) -> bool:
        """True for entries that are neither directories nor volume labels."""
        return not self.is_directory() and not self.attributes & ATTR_VOLUME_LABEL

    def is_volume_label(self) -> bool:
        """True if the volume label attribute is set."""
        return bool(self.attributes & ATTR_VOLUME_LABEL)

    def first_cluster(self) -> int:
        """The first cluster, assembled from its high and low halves."""
        return (self.first_cluster_high << 16) | self.first_cluster_low

    def short_name(self) -> str:
        """The name in ``NAME.EXT`` form, without padding."""
        base = self.name[:8].split(bytes([_PAD]), 1)[0]
        extension = bytes(b for b in self.name[8:11] if b != _PAD)
        name = _decode(base, "name")
        if extension:
            return f"{name}.{_decode(extension, 'extension')}"
        return name


@dataclass(frozen=True)
class LongFileNameEntry:
    """A long file name entry holding 13 UTF-16 code units of a name."""

    sequence: int
    name1: tuple[int, ...]
    attributes: int
    type_: int
    checksum: int
    name2: tuple[int, ...]
    first_cluster: int
    name3: tuple[int, ...]

    def is_valid(self) -> bool:
        """True if the attribute, type and cluster fields mark a long name entry."""
        return self.attributes == ATTR_LONG_NAME and self.type_ == 0 and self.first_cluster == 0

    def sequence_number(self) -> int:
        """The position of this entry within its long name."""
        return self.sequence & SEQUENCE_MASK

    def is_last(self) -> bool:
        """True if this entry holds the final part of the long name."""
        return bool(self.sequence & LAST_LONG_ENTRY)

    def name_chars(self) -> list[int]:
        """The UTF-16 code units carried by this entry, in order."""
        return [*self.name1, *self.name2, *self.name3]


@dataclass(frozen=True)
class DirEntry:
    """A short directory entry together with its optional long name."""

    entry: DirectoryEntry
    long_name: str | None = None

    def with_long_name(self, long_name: str) -> DirEntry:
        """Return a copy carrying ``long_name``."""
        return dataclasses.replace(self, long_name=long_name)

    def name(self) -> str:
        """The long name if there is one, otherwise the short name."""
        if self.long_name is not None:
            return self.long_name
        return self.entry.short_name()

    def is_directory(self) -> bool:
        """True if the entry is a directory."""
        return self.entry.is_directory()

    def is_file(self) -> bool:
        """True if the entry is a regular file."""
        return self.entry.is_file()

    def first_cluster(self) -> int:
        """The first cluster of the entry's data."""
        return self.entry.first_cluster()

    def file_size(self) -> int:
        """The size of the file in bytes."""
        return self.entry.file_size