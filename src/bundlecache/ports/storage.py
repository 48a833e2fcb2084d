"""Storage port interface."""

from pathlib import Path
from typing import BinaryIO, Protocol


class StoragePort(Protocol):
    """Port for object storage operations against a single bucket."""

    def put(self, key: str, local_file: Path) -> int:
        """Upload file under key. Returns the number of bytes sent."""
        ...

    def get(self, key: str, out: BinaryIO) -> None:
        """Stream object into an open binary file."""
        ...
