import logging
from typing import Any, Iterable

from typing_extensions import override


class EndpointFilter(logging.Filter):
    """Drops uvicorn access log records for noisy endpoints such as /health."""

    def __init__(
        self,
        paths: Iterable[str],
        *args: Any,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self._paths: tuple[str, ...] = tuple(paths)

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        message: str = record.getMessage()
        return not any(f" {path} " in message for path in self._paths)
