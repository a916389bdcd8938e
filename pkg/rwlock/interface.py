"""Interface for reader/writer exclusion."""

from typing import AsyncContextManager, Protocol, runtime_checkable


@runtime_checkable
class IRWLock(Protocol):
    """Protocol for a multi-reader / single-writer lock."""

    def read(self) -> AsyncContextManager[None]:
        """Hold the shared side for the duration of the block."""
        ...

    def write(self) -> AsyncContextManager[None]:
        """Hold the exclusive side for the duration of the block."""
        ...


__all__ = ["IRWLock"]
