"""Logger port interface."""

from typing import Any, Protocol


class LoggerPort(Protocol):
    """Port for structured logging."""

    def debug(self, message: str, **kwargs: Any) -> None: ...

    def info(self, message: str, **kwargs: Any) -> None: ...

    def warning(self, message: str, **kwargs: Any) -> None: ...

    def error(self, message: str, **kwargs: Any) -> None: ...

    def log_operation(
        self,
        op: str,
        key: str,
        sizes: dict[str, int] | None = None,
        durations: dict[str, float] | None = None,
        **kwargs: Any,
    ) -> None:
        """Log a completed operation with sizes and timings."""
        ...
