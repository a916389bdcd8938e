from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pkg.zstd.constant import ZSTD_LEVEL_MAP
from .constant import *


@dataclass
class Config:
    """Configuration for the advisory gateway."""

    compression_level: int = DEFAULT_COMPRESSION_LEVEL

    def __post_init__(self):
        if self.compression_level not in ZSTD_LEVEL_MAP:
            raise ValueError("compression_level must be 0-3")


@dataclass
class LookupInput:
    """Lookup by advisory identifier, or by CVE (not resolvable yet)."""

    advisory: Optional[str] = None
    cve: Optional[str] = None


@dataclass
class LookupOutput:
    """A stored advisory, always decompressed."""

    identifier: str
    data: bytes
    compressed: bool


@dataclass
class PublishInput:
    """Raw request body and the optional explicit identifier."""

    data: bytes
    advisory: Optional[str] = None


@dataclass
class PublishOutput:
    """Result of a publish.

    Attributes:
        identifier: Key the advisory is stored under
        size: Persisted byte length (post-compression when compressed)
        compressed: Whether the stored bytes are a zstd frame
    """

    identifier: str
    size: int
    compressed: bool


# Only the part of a CSAF document needed to derive its key is modelled.


class CsafTracking(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str = Field(min_length=1)


class CsafDocumentMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    tracking: CsafTracking


class CsafDocument(BaseModel):
    """CSAF advisory envelope."""

    model_config = ConfigDict(extra="allow")

    document: CsafDocumentMeta


__all__ = [
    "Config",
    "LookupInput",
    "LookupOutput",
    "PublishInput",
    "PublishOutput",
    "CsafDocument",
]
