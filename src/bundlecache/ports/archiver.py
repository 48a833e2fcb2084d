"""Archiver port interface."""

from pathlib import Path
from typing import Protocol


class ArchiverPort(Protocol):
    """Port for gzip-compressed tar archives."""

    def archive(self, source_dir: Path, archive_path: Path) -> None:
        """Compress the contents of source_dir into archive_path."""
        ...

    def extract(self, archive_path: Path, target_dir: Path) -> None:
        """Unpack archive_path into target_dir."""
        ...
