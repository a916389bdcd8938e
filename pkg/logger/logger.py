import sys
from typing import Iterator, Optional, Protocol, runtime_checkable
from contextvars import ContextVar
from contextlib import contextmanager
from loguru import logger as _loguru_logger  # type: ignore

from .constant import *
from .type import LoggerConfig

# Request ID of the request being served (async-safe)
_request_id_var: ContextVar[Optional[str]] = ContextVar(REQUEST_ID_KEY, default=None)


@runtime_checkable
class ILogger(Protocol):
    """Protocol defining the Logger interface."""

    def request_context(self, request_id: str) -> Iterator[None]: ...

    def get_request_id(self) -> Optional[str]: ...

    def debug(self, message: str, **kwargs) -> None: ...

    def info(self, message: str, **kwargs) -> None: ...

    def warning(self, message: str, **kwargs) -> None: ...

    def error(self, message: str, **kwargs) -> None: ...

    def exception(self, message: str, **kwargs) -> None: ...


class Logger(ILogger):
    """Loguru wrapper that stamps every line with the current request ID.

    Usage:
        logger = Logger(LoggerConfig(level="INFO"))

        with logger.request_context(request_id):
            logger.info("internal.vex.usecase.lookup: Looking up advisory")
    """

    def __init__(self, config: LoggerConfig):
        """Initialize logger with configuration.

        Args:
            config: Logger configuration
        """
        self.config = config
        self._loguru = _loguru_logger.bind(**{SERVICE_KEY: config.service_name})

        # Remove default handler
        _loguru_logger.remove()

        if self.config.enable_console:
            self._add_console_handler()

    def _add_console_handler(self) -> None:
        """Add console handler with service name and request ID."""

        def inject_request_id(record):
            record["extra"].setdefault(SERVICE_KEY, self.config.service_name)
            record["extra"][REQUEST_ID_KEY] = _request_id_var.get() or "-"
            return True

        format_str = (
            f"{LOG_FORMAT_TIME} | {LOG_FORMAT_LEVEL} | {LOG_FORMAT_SERVICE} | "
            f"{LOG_FORMAT_REQUEST} | {LOG_FORMAT_MESSAGE}"
        )

        _loguru_logger.add(
            sys.stdout,
            colorize=self.config.colorize,
            format=format_str,
            level=self.config.level.value,
            filter=inject_request_id,
        )

    @contextmanager
    def request_context(self, request_id: str):
        """Attach request_id to every line logged inside the block."""
        token = _request_id_var.set(request_id)
        try:
            yield
        finally:
            _request_id_var.reset(token)

    def get_request_id(self) -> Optional[str]:
        return _request_id_var.get()

    def debug(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).debug(message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).info(message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).warning(message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).error(message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log exception with traceback."""
        self._loguru.opt(depth=1, exception=True).error(message, **kwargs)


__all__ = [
    "Logger",
    "ILogger",
    "LoggerConfig",
]
