"""Unit tests for the Zstd codec."""

import io
import json

import pytest
import zstandard

from pkg.zstd.constant import LEVEL_NO_COMPRESSION, LEVEL_FAST, LEVEL_BEST
from pkg.zstd.type import ZstdConfig
from pkg.zstd.zstd import Zstd


class TestZstdConfig:
    """Test codec configuration."""

    def test_defaults_to_fast_level(self):
        config = ZstdConfig()
        assert config.level == LEVEL_FAST
        assert config.native_level == 3

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid compression level"):
            ZstdConfig(level=7)


class TestCompressDecompress:
    """Test compression and decompression."""

    @pytest.fixture
    def codec(self):
        return Zstd()

    def test_roundtrip_various_sizes(self, codec):
        """decode(encode(B)) == B for a spread of inputs."""
        test_cases = [
            b"",
            b"x",
            b"hello",
            bytes(range(256)),
            b"test " * 1000,
            json.dumps({"document": {"tracking": {"id": "RHSA-2023:1441"}}}).encode(),
        ]
        for original in test_cases:
            assert codec.decompress(codec.compress(original)) == original

    def test_repetitive_data_shrinks(self, codec):
        original = b"vulnerability " * 1000
        assert len(codec.compress(original)) < len(original)

    def test_output_is_zstd_frame(self, codec):
        compressed = codec.compress(b"hello")
        assert compressed[:4] == b"\x28\xb5\x2f\xfd"

    def test_level_zero_is_passthrough(self, codec):
        assert codec.compress(b"hello", LEVEL_NO_COMPRESSION) == b"hello"

    def test_best_level_not_larger_than_fast(self, codec):
        original = b"test data " * 500
        assert len(codec.compress(original, LEVEL_BEST)) <= len(
            codec.compress(original, LEVEL_FAST)
        )

    def test_invalid_level_raises(self, codec):
        with pytest.raises(ValueError):
            codec.compress(b"hello", 9)

    def test_input_not_mutated(self, codec):
        original = bytearray(b"advisory " * 50)
        snapshot = bytes(original)
        codec.compress(original)
        assert bytes(original) == snapshot

    def test_decompress_invalid_data(self, codec):
        with pytest.raises(zstandard.ZstdError, match="decompression failed"):
            codec.decompress(b"this is not compressed data")

    def test_decompress_truncated_frame(self, codec):
        compressed = codec.compress(b"advisory " * 200)
        with pytest.raises(zstandard.ZstdError):
            codec.decompress(compressed[: len(compressed) // 2])


    def test_decompress_empty_input(self, codec):
        with pytest.raises(zstandard.ZstdError, match="decompression failed"):
            codec.decompress(b"")


class TestStreamedFrames:
    """Frames written by streaming compressors carry no content size."""

    @pytest.fixture
    def codec(self):
        return Zstd()

    @staticmethod
    def stream_compress(data: bytes) -> bytes:
        out = io.BytesIO()
        zstandard.ZstdCompressor().copy_stream(io.BytesIO(data), out)
        return out.getvalue()

    def test_frame_without_content_size(self, codec):
        frame = self.stream_compress(b"hello advisory")
        assert zstandard.frame_content_size(frame) == -1

        assert codec.decompress(frame) == b"hello advisory"

    def test_large_streamed_frame(self, codec):
        original = b"vulnerability " * 50000
        assert codec.decompress(self.stream_compress(original)) == original

    def test_concatenated_frames(self, codec):
        frames = codec.compress(b"first ") + self.stream_compress(b"second")
        assert codec.decompress(frames) == b"first second"

    def test_truncated_streamed_frame(self, codec):
        frame = self.stream_compress(b"advisory " * 200)
        with pytest.raises(zstandard.ZstdError, match="decompression failed"):
            codec.decompress(frame[:-4])

    def test_trailing_garbage(self, codec):
        frame = self.stream_compress(b"hello")
        with pytest.raises(zstandard.ZstdError):
            codec.decompress(frame + b"garbage")
