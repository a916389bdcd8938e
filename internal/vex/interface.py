from typing import Protocol, runtime_checkable

from .type import LookupInput, LookupOutput, PublishInput, PublishOutput


@runtime_checkable
class IVexUseCase(Protocol):
    """Protocol for advisory publish and lookup."""

    async def lookup(self, input_data: LookupInput) -> LookupOutput:
        """Fetch a stored advisory by identifier."""
        ...

    async def publish(self, input_data: PublishInput) -> PublishOutput:
        """Store an advisory, replacing any previous one with the same id."""
        ...


__all__ = ["IVexUseCase"]
