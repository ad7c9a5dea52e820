"""Read-only decoding of in-memory FAT32 volume images."""

__version__ = "0.1.0"