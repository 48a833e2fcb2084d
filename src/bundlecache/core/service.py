"""Core BundleCacheService orchestration."""

import shutil
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ..ports import ArchiverPort, HashPort, LoggerPort, StoragePort
from .config import BundleCacheConfig
from .errors import (
    BundleCacheError,
    ExtractError,
    MissingBundleError,
    MissingLockfileError,
)
from .models import STAGED_ARCHIVE_NAME, ArchiveKey, OperationResult


class BundleCacheService:
    """Core service for bundle upload and download."""

    def __init__(
        self,
        config: BundleCacheConfig,
        storage: StoragePort,
        archiver: ArchiverPort,
        hasher: HashPort,
        logger: LoggerPort,
        progress: Callable[[str], None] | None = None,
    ):
        """Initialize service with ports.

        Args:
            progress: Receives user-facing progress lines ("Archiving...", ...).
        """
        self.config = config
        self.storage = storage
        self.archiver = archiver
        self.hasher = hasher
        self.logger = logger
        self.progress = progress

    def _report(self, message: str, **kwargs: Any) -> None:
        if self.progress is not None:
            self.progress(message)
        self.logger.info(message, **kwargs)

    def prepare(self) -> ArchiveKey:
        """Derive the archive key from the lockfile and clear any stale archive.

        Raises:
            MissingLockfileError: lockfile does not exist.
            BundleCacheError: lockfile unreadable, or stale archive not removable.
        """
        lockfile = self.config.lockfile_path
        if not lockfile.exists():
            raise MissingLockfileError(f"{lockfile} does not exist")

        try:
            checksum = self.hasher.sha1(lockfile)
        except OSError as e:
            raise BundleCacheError(f"Unable to read {lockfile.name}") from e

        archive = ArchiveKey.derive(self.config, checksum)
        self.logger.debug("Derived archive key", key=archive.name, lockfile_sha1=checksum)

        if archive.local_path.exists():
            self.logger.debug("Removing stale archive", path=str(archive.local_path))
            try:
                archive.local_path.unlink()
            except OSError as e:
                raise BundleCacheError("Failed to remove existing archive") from e

        return archive

    def upload(self, archive: ArchiveKey) -> OperationResult:
        """Archive the bundle directory and store it under the archive key."""
        if self.config.cache_marker_path.exists():
            self.logger.info("Cache marker present, nothing to upload", key=archive.name)
            return OperationResult(
                operation="upload",
                status="cached",
                key=archive.name,
                message="Your bundle is cached, skipping.",
            )

        bundle_path = self.config.bundle_path
        if not bundle_path.exists():
            raise MissingBundleError("Bundle path does not exist")

        start_time = time.perf_counter()

        self._report("Archiving...", source=str(bundle_path), archive=str(archive.local_path))
        self.archiver.archive(bundle_path, archive.local_path)
        archived = time.perf_counter()

        self._report("Uploading bundle to S3...", bucket=self.config.bucket, key=archive.name)
        size = self.storage.put(archive.name, archive.local_path)
        finished = time.perf_counter()

        self.logger.log_operation(
            op="upload",
            key=archive.name,
            sizes={"archive": size},
            durations={"archive": archived - start_time, "total": finished - start_time},
        )
        return OperationResult(
            operation="upload",
            status="uploaded",
            key=archive.name,
            message="Done",
            size=size,
        )

    def download(self, archive: ArchiveKey) -> OperationResult:
        """Fetch the archive for the current lockfile and unpack it into .bundle."""
        bundle_path = self.config.bundle_path
        if bundle_path.exists():
            self.logger.info("Bundle directory present, nothing to download", path=str(bundle_path))
            return OperationResult(
                operation="download",
                status="skipped",
                key=archive.name,
                message="Bundle path already exists, skipping.",
            )

        start_time = time.perf_counter()

        try:
            out = open(archive.local_path, "wb")
        except OSError as e:
            raise BundleCacheError(f"Unable to create {archive.local_path}: {e}") from e

        self._report("Downloading bundle from S3...", bucket=self.config.bucket, key=archive.name)
        with out:
            self.storage.get(archive.name, out)
        size = archive.local_path.stat().st_size
        downloaded = time.perf_counter()

        self._report("Extracting...", target=str(bundle_path))
        self.unpack(archive.local_path)

        marker = self.config.cache_marker_path
        if not marker.exists():
            marker.touch()
        finished = time.perf_counter()

        self.logger.log_operation(
            op="download",
            key=archive.name,
            sizes={"archive": size},
            durations={"download": downloaded - start_time, "total": finished - start_time},
        )
        return OperationResult(
            operation="download",
            status="downloaded",
            key=archive.name,
            message="Done",
            size=size,
        )

    def unpack(self, archive_path: Path) -> Path:
        """Unpack a downloaded archive into a fresh .bundle directory.

        Steps run in order and stop at the first failure. Nothing is rolled
        back: a failure after the directory was created leaves it in place.

        Returns:
            The bundle directory.

        Raises:
            ExtractError: .bundle already exists, or move, extract or cleanup failed.
        """
        bundle_path = self.config.bundle_path

        # Exclusive create; a concurrent download loses here
        try:
            bundle_path.mkdir()
        except FileExistsError as e:
            raise ExtractError("Bundle directory '.bundle' already exists") from e
        except OSError as e:
            raise ExtractError(f"Unable to create bundle directory: {e}") from e

        staged = bundle_path / STAGED_ARCHIVE_NAME
        try:
            shutil.move(str(archive_path), str(staged))
        except OSError as e:
            raise ExtractError(f"Unable to move file: {e}") from e

        self.archiver.extract(staged, bundle_path)

        try:
            staged.unlink()
        except OSError as e:
            raise ExtractError("Unable to remove archive") from e

        self.logger.debug("Bundle unpacked", path=str(bundle_path))
        return bundle_path
