"""Interface for object storage operations."""

from typing import Dict, Protocol, runtime_checkable

from .type import StoredObject


@runtime_checkable
class IObjectStorage(Protocol):
    """Key-value contract over an object store.

    The compressed flag is tracked by the store next to the bytes, never
    inside them.
    """

    async def get(self, key: str) -> StoredObject:
        """Fetch an object, raising MinioObjectNotFoundError when absent."""
        ...

    async def put(
        self,
        key: str,
        metadata: Dict[str, str],
        data: bytes,
        compressed: bool,
    ) -> None:
        """Store an object, replacing any previous one under key."""
        ...


__all__ = ["IObjectStorage"]
