"""Hash port interface."""

from pathlib import Path
from typing import Protocol


class HashPort(Protocol):
    """Port for content hashing."""

    def sha1(self, path: Path) -> str:
        """Lowercase hex SHA-1 of the raw file bytes."""
        ...
