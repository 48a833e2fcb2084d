"""Adapters implementing the port interfaces."""

from .archiver_tar import TarCommandAdapter
from .archiver_tarfile import TarfileArchiverAdapter
from .hash_sha1 import Sha1Adapter
from .logger_std import StdLoggerAdapter
from .storage_s3 import S3StorageAdapter

__all__ = [
    "S3StorageAdapter",
    "Sha1Adapter",
    "StdLoggerAdapter",
    "TarCommandAdapter",
    "TarfileArchiverAdapter",
]
