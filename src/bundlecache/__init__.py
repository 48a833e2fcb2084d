"""bundle-cache - Cache dependency bundles in S3, keyed by lockfile checksum."""

try:
    from ._version import version as __version__
except ImportError:
    # Package is not installed, so version is not available
    __version__ = "0.0.0+unknown"
