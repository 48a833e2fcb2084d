"""Core domain logic."""

from .config import BundleCacheConfig
from .errors import (
    ArchiveError,
    BundleCacheError,
    ExtractError,
    MissingBundleError,
    MissingCredentialsError,
    MissingLockfileError,
    StorageError,
)
from .models import ArchiveKey, OperationResult
from .service import BundleCacheService

__all__ = [
    "ArchiveError",
    "ArchiveKey",
    "BundleCacheConfig",
    "BundleCacheError",
    "BundleCacheService",
    "ExtractError",
    "MissingBundleError",
    "MissingCredentialsError",
    "MissingLockfileError",
    "OperationResult",
    "StorageError",
]
