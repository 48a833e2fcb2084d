"""SHA-1 hashing adapter."""

import hashlib
from pathlib import Path


class Sha1Adapter:
    """SHA-1 implementation of HashPort."""

    def sha1(self, path: Path) -> str:
        h = hashlib.sha1()
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(8192), b""):
                h.update(chunk)
        return h.hexdigest()
