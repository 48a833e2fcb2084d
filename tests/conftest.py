"""Shared fixtures."""

from pathlib import Path
from typing import Any, BinaryIO

import pytest

from bundlecache.adapters import Sha1Adapter, TarfileArchiverAdapter
from bundlecache.core import BundleCacheConfig, BundleCacheService, StorageError

LOCKFILE_BYTES = b"gemA (1.0)\n"


class InMemoryStorage:
    """StoragePort fake keeping objects in a dict."""

    def __init__(self) -> None:
        self.objects: dict[str, bytes] = {}
        self.calls: list[tuple[str, str]] = []

    def put(self, key: str, local_file: Path) -> int:
        self.calls.append(("put", key))
        data = local_file.read_bytes()
        self.objects[key] = data
        return len(data)

    def get(self, key: str, out: BinaryIO) -> None:
        self.calls.append(("get", key))
        if key not in self.objects:
            raise StorageError(f"Failed to download {key}: NoSuchKey")
        out.write(self.objects[key])


class NullLogger:
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    def info(self, message: str, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    def error(self, message: str, **kwargs: Any) -> None:
        pass

    def log_operation(self, op: str, key: str, sizes=None, durations=None, **kwargs: Any) -> None:
        pass


def write_bundle(bundle: Path) -> None:
    """Populate a small installed-gems tree."""
    gem_dir = bundle / "ruby" / "3.2.0" / "gems" / "gemA-1.0" / "lib"
    gem_dir.mkdir(parents=True)
    (gem_dir / "gem_a.rb").write_text("module GemA; end\n")
    (bundle / "config").write_text("---\nBUNDLE_PATH: \".bundle\"\n")
    (bundle / "ruby" / "3.2.0" / "bin").mkdir()
    (bundle / "ruby" / "3.2.0" / "bin" / "gem_a").write_bytes(b"#!/usr/bin/env ruby\n\x00\x01")


def snapshot(root: Path) -> dict[str, bytes]:
    return {
        str(p.relative_to(root)): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "myapp"
    path.mkdir()
    (path / "Gemfile.lock").write_bytes(LOCKFILE_BYTES)
    return path


@pytest.fixture
def archive_tmp(tmp_path: Path) -> Path:
    path = tmp_path / "tmp"
    path.mkdir()
    return path


@pytest.fixture
def config(workdir: Path, archive_tmp: Path) -> BundleCacheConfig:
    return BundleCacheConfig(
        path=workdir,
        prefix="myapp",
        bucket="ci-cache",
        region="us-east-1",
        access_key="AKIDEXAMPLE",
        secret_key="secret",
        architecture="amd64",
        tmp_dir=archive_tmp,
    )


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def service(config: BundleCacheConfig, storage: InMemoryStorage) -> BundleCacheService:
    return BundleCacheService(
        config=config,
        storage=storage,
        archiver=TarfileArchiverAdapter(),
        hasher=Sha1Adapter(),
        logger=NullLogger(),
    )
