"""Native tar/gzip archiver adapter."""

import tarfile
from pathlib import Path

from ..core.errors import ArchiveError, ExtractError


class TarfileArchiverAdapter:
    """ArchiverPort implementation using the tarfile module."""

    def __init__(self, compresslevel: int = 6):
        self.compresslevel = compresslevel

    def archive(self, source_dir: Path, archive_path: Path) -> None:
        # Members are stored relative to source_dir, like `tar -czf X .`
        try:
            with tarfile.open(archive_path, "w:gz", compresslevel=self.compresslevel) as tar:
                tar.add(source_dir, arcname=".")
        except (tarfile.TarError, OSError) as e:
            raise ArchiveError(f"Failed to make archive: {e}") from e

    def extract(self, archive_path: Path, target_dir: Path) -> None:
        # "tar" filter: members stay inside target_dir, link targets are kept as-is
        try:
            with tarfile.open(archive_path, "r:gz") as tar:
                tar.extractall(target_dir, filter="tar")
        except (tarfile.TarError, OSError) as e:
            raise ExtractError(f"Unable to extract: {e}") from e
