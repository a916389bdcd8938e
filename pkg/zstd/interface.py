"""Interface for Zstd compression operations."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class IZstd(Protocol):
    """Protocol for in-memory compression operations.

    Implementations hold no mutable state and are safe to call concurrently.
    """

    def compress(self, data: bytes, level: Optional[int] = None) -> bytes:
        """Compress bytes data in memory."""
        ...

    def decompress(self, data: bytes) -> bytes:
        """Decompress bytes data in memory."""
        ...


__all__ = ["IZstd"]
