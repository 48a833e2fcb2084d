"""External tar process adapter."""

import subprocess
from pathlib import Path

from ..core.errors import ArchiveError, ExtractError


class TarCommandAdapter:
    """ArchiverPort implementation that runs the tar utility."""

    def __init__(self, tar_path: str = "tar"):
        self.tar_path = tar_path

    def _run(self, args: list[str], cwd: Path) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            [self.tar_path, *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )

    def archive(self, source_dir: Path, archive_path: Path) -> None:
        try:
            result = self._run(["-czf", str(archive_path), "."], cwd=source_dir)
        except OSError as e:
            raise ArchiveError(f"Failed to make archive: {e}") from e
        if result.returncode != 0:
            raise ArchiveError(f"Failed to make archive: {result.stderr.strip()}")

    def extract(self, archive_path: Path, target_dir: Path) -> None:
        try:
            result = self._run(["-xzf", str(archive_path)], cwd=target_dir)
        except OSError as e:
            raise ExtractError(f"Unable to extract: {e}") from e
        if result.returncode != 0:
            output = (result.stdout + result.stderr).strip()
            raise ExtractError(f"Unable to extract: {output}")
