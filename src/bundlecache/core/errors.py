"""Core domain errors.

Every error carries the process exit code the CLI terminates with.
"""


class BundleCacheError(Exception):
    """Base error for bundle-cache."""

    exit_code = 1


class MissingCredentialsError(BundleCacheError):
    """Access key, secret key, bucket or region could not be resolved."""

    exit_code = 3


class MissingBundleError(BundleCacheError):
    """Bundle directory does not exist."""

    exit_code = 4


class MissingLockfileError(BundleCacheError):
    """Lockfile does not exist."""

    exit_code = 5


class ArchiveError(BundleCacheError):
    """Creating the archive failed."""


class ExtractError(BundleCacheError):
    """Unpacking a downloaded archive failed."""


class StorageError(BundleCacheError):
    """Object storage put or get failed."""
