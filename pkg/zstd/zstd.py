from typing import Optional

import zstandard as zstd  # type: ignore

from .constant import *
from .interface import IZstd
from .type import ZstdConfig


class Zstd(IZstd):
    """
    Zstandard codec for whole payloads.

    A new compressor/decompressor is created per call, zstandard contexts
    are not safe to share between threads.
    """

    def __init__(self, config: Optional[ZstdConfig] = None):
        """Initialize Zstd codec with configuration.

        Args:
            config: ZstdConfig configuration, defaults to the fast level
        """
        self.config = config or ZstdConfig()

    def compress(self, data: bytes, level: Optional[int] = None) -> bytes:
        """
        Compress bytes data into a single zstd frame.

        Args:
            data: Raw bytes to compress
            level: Compression level (0-3), defaults to config.level

        Returns:
            Compressed bytes. The frame always records the content size.

        Raises:
            ValueError: If level is invalid
            zstd.ZstdError: If compression fails
        """
        if level is None:
            level = self.config.level
        if level not in ZSTD_LEVEL_MAP:
            raise ValueError(ERROR_INVALID_LEVEL.format(level=level))

        # Level 0 = no compression, return as-is
        if level == LEVEL_NO_COMPRESSION:
            return data

        try:
            compressor = zstd.ZstdCompressor(
                level=ZSTD_LEVEL_MAP[level], write_content_size=True
            )
            return compressor.compress(bytes(data))
        except zstd.ZstdError as e:
            raise zstd.ZstdError(ERROR_COMPRESSION_FAILED.format(error=e)) from e

    def decompress(self, data: bytes) -> bytes:
        """
        Decompress one or more concatenated zstd frames.

        Frames written by streaming compressors do not record their content
        size, so every frame is decoded incrementally. The whole output is
        produced before anything is returned.

        Args:
            data: Compressed bytes

        Returns:
            Decompressed bytes

        Raises:
            zstd.ZstdError: If decompression fails or the input is truncated
        """
        try:
            decompressor = zstd.ZstdDecompressor()
            remaining = bytes(data)
            chunks = []
            while True:
                dobj = decompressor.decompressobj()
                chunks.append(dobj.decompress(remaining))
                if not dobj.eof:
                    raise zstd.ZstdError(ERROR_INCOMPLETE_FRAME)
                remaining = dobj.unused_data
                if not remaining:
                    break
            return b"".join(chunks)
        except zstd.ZstdError as e:
            raise zstd.ZstdError(ERROR_DECOMPRESSION_FAILED.format(error=e)) from e


__all__ = [
    "Zstd",
    "IZstd",
    "ZstdConfig",
]
