# minifat

A small, pure-Python library for decoding FAT32 volume images held in memory.
It has no dependencies outside the standard library.

It parses the boot sector, decodes the first file allocation table, follows
cluster chains, reads raw data clusters and decodes 32-byte short-name
directory entries.

## Installation

```
pip install minifat
```

## Usage

### A whole volume

```python
from minifat.volume import Fat32Volume

with open("disk.img", "rb") as fh:
    volume = Fat32Volume.from_bytes(fh.read())

boot = volume.boot_sector
chain = volume.cluster_chain(boot.root_cluster)
print(len(chain), list(chain), chain.total_size(boot.cluster_size()))

root_dir = b"".join(volume.read_cluster(n) for n in chain)
```

`Fat32Volume.from_bytes` parses the boot sector and the first FAT copy;
`cluster_chain` follows the FAT from a start cluster to its end-of-chain
marker; `read_cluster` returns the bytes of one data cluster (cluster numbers
start at 2).

### The pieces on their own

```python
from minifat.boot import BootSector
from minifat.fat_table import FatTable
from minifat.cluster import ClusterChain
from minifat.entry import DirectoryEntry, DirEntry

boot = BootSector.from_bytes(image)          # first 512 bytes are used
print(boot.cluster_size(), boot.fat_start_sector(), boot.data_start_sector())

fat = FatTable.from_bytes(fat_bytes)         # 32-bit entries, low 28 bits kept
print(len(fat), fat.get_entry(2), fat.is_end_of_chain(2), fat.is_free_cluster(3))

chain = ClusterChain.from_fat(fat, 2)

entry = DirectoryEntry.from_bytes(raw_32_bytes)
print(entry.short_name(), entry.is_directory(), entry.first_cluster(), entry.file_size)

item = DirEntry(entry).with_long_name("Long name.txt")
print(item.name(), item.is_file())
```

`BootSector.from_bytes` accepts only data whose file-system type field starts
with `FAT3` and whose last two bytes hold the `0xAA55` signature.
`DirectoryEntry.from_bytes` rejects free (`0x00`) and deleted (`0xE5`) slots.
`LongFileNameEntry` holds the fields of a long-file-name entry and reports its
sequence number, whether it is the last one and its UTF-16 code units; it is
built from its fields, not parsed from bytes.

## Errors

Every failure raises a subclass of `minifat.errors.FileSystemError`:
`InvalidBootSectorError`, `InvalidFatError`, `ClusterChainError`,
`DirectoryEntryError` or `VolumeIOError`.

## What it does not do

- It does not resolve paths, list directories, change a current directory or
  read a file by name; the caller walks directory clusters and decodes the
  entries itself.
- It does not assemble long file names from a directory's entries.
- It never writes: files cannot be created or modified.
- It has no command-line tool.

## Tests

```
pip install -e ".[test]"
pytest
```