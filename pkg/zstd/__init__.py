from .type import ZstdConfig
from .interface import IZstd
from .zstd import Zstd

__all__ = [
    "IZstd",
    "Zstd",
    "ZstdConfig",
]
