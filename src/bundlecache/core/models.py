"""Core domain models."""

from dataclasses import dataclass
from pathlib import Path

from .config import BundleCacheConfig

ARCHIVE_SUFFIX = ".tar.gz"
STAGED_ARCHIVE_NAME = "bundle_cache.tar.gz"


@dataclass(frozen=True, slots=True)
class ArchiveKey:
    """Content-addressed archive name and its transient local path.

    The name is also the object key in the bucket.
    """

    name: str
    local_path: Path

    @classmethod
    def derive(cls, config: BundleCacheConfig, lockfile_sha1: str) -> "ArchiveKey":
        name = f"{config.prefix}_{lockfile_sha1}_{config.architecture}{ARCHIVE_SUFFIX}"
        return cls(name=name, local_path=config.tmp_dir / name)


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of an upload or download run."""

    operation: str  # "upload" or "download"
    status: str  # "uploaded", "downloaded", "cached", "skipped"
    key: str
    message: str
    size: int | None = None
