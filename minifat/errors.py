"""Exceptions raised while reading a FAT32 volume."""


class FileSystemError(Exception):
    """Base class for every error raised by the package."""


class InvalidBootSectorError(FileSystemError):
    """The boot sector is missing, truncated or not a FAT32 boot sector."""


class InvalidFatError(FileSystemError):
    """The file allocation table is malformed or was indexed out of range."""


class ClusterChainError(FileSystemError):
    """A cluster chain is invalid, circular or runs into a bad cluster."""


class DirectoryEntryError(FileSystemError):
    """A directory entry is truncated, free, deleted or undecodable."""


class VolumeIOError(FileSystemError):
    """A read went past the end of the volume image."""