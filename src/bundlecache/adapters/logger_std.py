"""Standard library logging adapter."""

import logging
import sys
from typing import Any

LOGGER_NAME = "bundlecache"


class StdLoggerAdapter:
    """Logger implementation of LoggerPort on top of the logging module."""

    def __init__(self, name: str = LOGGER_NAME, level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            )
            self.logger.addHandler(handler)
            self.logger.propagate = False

    def _format(self, message: str, fields: dict[str, Any]) -> str:
        if not fields:
            return message
        rendered = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{message} {rendered}"

    def debug(self, message: str, **kwargs: Any) -> None:
        self.logger.debug(self._format(message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.logger.info(self._format(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.logger.warning(self._format(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self.logger.error(self._format(message, kwargs))

    def log_operation(
        self,
        op: str,
        key: str,
        sizes: dict[str, int] | None = None,
        durations: dict[str, float] | None = None,
        **kwargs: Any,
    ) -> None:
        fields: dict[str, Any] = {"op": op, "key": key}
        for name, value in (sizes or {}).items():
            fields[f"size_{name}"] = value
        for name, value in (durations or {}).items():
            fields[f"duration_{name}"] = f"{value:.3f}s"
        fields.update(kwargs)
        self.logger.info(self._format("Operation complete", fields))
