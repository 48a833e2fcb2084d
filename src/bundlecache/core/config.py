"""Centralized configuration for bundle-cache."""

import os
import platform
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .errors import MissingCredentialsError

BUNDLE_DIR_NAME = ".bundle"
LOCKFILE_NAME = "Gemfile.lock"
CACHE_MARKER_NAME = ".cache"
DEFAULT_TMP_DIR = Path("/tmp")

# (option name, environment fallback, message when unresolved), in check order
CREDENTIAL_FIELDS = (
    ("access_key", "AWS_ACCESS_KEY", "Please provide S3 access key"),
    ("secret_key", "AWS_SECRET_KEY", "Please provide S3 secret key"),
    ("bucket", "S3_BUCKET", "Please provide S3 bucket name"),
    ("region", "AWS_DEFAULT_REGION", "Please provide S3 region name"),
)

# platform.machine() -> Go-style architecture names used in archive keys
_MACHINE_ARCH = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv6l": "arm",
    "armv7l": "arm",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
    "riscv64": "riscv64",
}


def host_architecture(machine: str | None = None) -> str:
    """Return the architecture name of the running machine."""
    machine = (machine if machine is not None else platform.machine()).lower()
    return _MACHINE_ARCH.get(machine, machine or "unknown")


@dataclass(frozen=True, slots=True)
class BundleCacheConfig:
    """All bundle-cache configuration in one place.

    Built once per invocation by ``resolve`` and never mutated afterwards.

    Environment variables:
        AWS_ACCESS_KEY:         Fallback for --access-key.
        AWS_SECRET_KEY:         Fallback for --secret-key.
        S3_BUCKET:              Fallback for --bucket.
        AWS_DEFAULT_REGION:     Fallback for --region.
        BUNDLE_CACHE_ARCH:      Architecture used in archive names. Default: host.
        BUNDLE_CACHE_TMPDIR:    Directory for the transient archive. Default "/tmp".
        BUNDLE_CACHE_ARCHIVER:  "native" (default) or "tar".
        BUNDLE_CACHE_LOG_LEVEL: Logging level. Default "INFO".
    """

    path: Path
    prefix: str
    bucket: str
    region: str
    access_key: str = field(repr=False)
    secret_key: str = field(repr=False)
    architecture: str = field(default_factory=host_architecture)
    tmp_dir: Path = DEFAULT_TMP_DIR
    archiver: str = "native"
    log_level: str = "INFO"

    @property
    def bundle_path(self) -> Path:
        return self.path / BUNDLE_DIR_NAME

    @property
    def lockfile_path(self) -> Path:
        return self.path / LOCKFILE_NAME

    @property
    def cache_marker_path(self) -> Path:
        return self.bundle_path / CACHE_MARKER_NAME

    @classmethod
    def resolve(
        cls,
        *,
        path: str | Path | None = None,
        prefix: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        bucket: str | None = None,
        region: str | None = None,
        log_level: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "BundleCacheConfig":
        """Merge command-line values with environment fallbacks.

        Raises:
            MissingCredentialsError: first of access key, secret key, bucket,
                region that is empty in both the flags and the environment.
        """
        env = os.environ if environ is None else environ

        given = {
            "access_key": access_key,
            "secret_key": secret_key,
            "bucket": bucket,
            "region": region,
        }
        credentials = {}
        for name, env_var, _ in CREDENTIAL_FIELDS:
            credentials[name] = given[name] or env.get(env_var, "")
        for name, _, message in CREDENTIAL_FIELDS:
            if not credentials[name]:
                raise MissingCredentialsError(message)

        work_path = Path(path).absolute() if path else Path.cwd()
        if not prefix:
            prefix = work_path.name

        return cls(
            path=work_path,
            prefix=prefix,
            architecture=env.get("BUNDLE_CACHE_ARCH") or host_architecture(),
            tmp_dir=Path(env.get("BUNDLE_CACHE_TMPDIR") or DEFAULT_TMP_DIR),
            archiver=env.get("BUNDLE_CACHE_ARCHIVER", "native"),
            log_level=log_level or env.get("BUNDLE_CACHE_LOG_LEVEL", "INFO"),
            **credentials,
        )
