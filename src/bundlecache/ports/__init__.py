"""Port interfaces."""

from .archiver import ArchiverPort
from .hash import HashPort
from .logger import LoggerPort
from .storage import StoragePort

__all__ = ["ArchiverPort", "HashPort", "LoggerPort", "StoragePort"]
