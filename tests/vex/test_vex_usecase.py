"""Unit tests for the advisory gateway use case."""

import asyncio
import io
import json

import pytest
import zstandard

from pkg.minio.minio import MinioAdapterError
from pkg.minio.type import StoredObject
from pkg.rwlock.rwlock import RWLock
from pkg.zstd.zstd import Zstd
from internal.vex import (
    Config,
    ErrAdvisoryNotFound,
    ErrDecodeFailure,
    ErrMalformedInput,
    ErrMissingParameter,
    ErrStoreFailure,
    ErrUnsupportedQuery,
    LookupInput,
    New,
    PublishInput,
)


def csaf(tracking_id: str) -> bytes:
    return json.dumps(
        {
            "document": {
                "category": "csaf_vex",
                "title": "Security advisory",
                "tracking": {"id": tracking_id, "version": "1"},
            },
            "vulnerabilities": [{"cve": "CVE-2023-0286"}],
        }
    ).encode()


class BrokenCodec(Zstd):
    """Codec whose compression always fails."""

    def compress(self, data, level=None):
        raise RuntimeError("compressor unavailable")


class TestNew:
    def test_rejects_invalid_config(self, storage, codec):
        with pytest.raises(ValueError, match="config"):
            New(config={}, storage=storage, codec=codec)

    def test_rejects_invalid_storage(self, codec):
        with pytest.raises(ValueError, match="storage"):
            New(config=Config(), storage=object(), codec=codec)

    def test_creates_default_lock(self, storage, codec):
        usecase = New(config=Config(), storage=storage, codec=codec)
        assert isinstance(usecase.lock, RWLock)

    @pytest.mark.parametrize("level", [-1, 4, 7])
    def test_rejects_unknown_compression_level(self, level):
        with pytest.raises(ValueError, match="compression_level"):
            Config(compression_level=level)

    @pytest.mark.parametrize("level", [0, 1, 2, 3])
    def test_accepts_every_codec_level(self, level):
        assert Config(compression_level=level).compression_level == level


class TestPublish:
    """Identifier derivation and compress-on-write."""

    async def test_explicit_identifier(self, usecase, storage, codec):
        result = await usecase.publish(PublishInput(data=b"hello", advisory="ADV-1"))

        assert result.identifier == "ADV-1"
        assert result.compressed is True
        stored = storage.objects["ADV-1"]
        assert stored.compressed is True
        assert stored.metadata == {}
        assert codec.decompress(stored.data) == b"hello"
        assert result.size == len(stored.data)

    async def test_identifier_from_csaf_document(self, usecase, storage):
        result = await usecase.publish(PublishInput(data=csaf("RHSA-2023:1441")))

        assert result.identifier == "RHSA-2023:1441"
        assert "RHSA-2023:1441" in storage.objects

    async def test_explicit_identifier_overrides_document(self, usecase, storage):
        result = await usecase.publish(
            PublishInput(data=csaf("RHSA-2023:1441"), advisory="OVERRIDE")
        )
        assert result.identifier == "OVERRIDE"
        assert list(storage.objects) == ["OVERRIDE"]

    @pytest.mark.parametrize(
        "body",
        [
            b"not json",
            b"\xff\xfe\x00",
            b"[]",
            b'{"document": {}}',
            b'{"document": {"tracking": {"id": ""}}}',
        ],
    )
    async def test_malformed_body_never_touches_store(self, usecase, storage, body):
        with pytest.raises(ErrMalformedInput):
            await usecase.publish(PublishInput(data=body))

        assert storage.put_calls == []
        assert storage.get_calls == []

    async def test_compression_failure_stores_uncompressed(self, storage, logger):
        usecase = New(config=Config(), storage=storage, codec=BrokenCodec(), logger=logger)

        result = await usecase.publish(PublishInput(data=b"hello", advisory="ADV-1"))

        assert result.compressed is False
        assert result.size == 5
        assert storage.objects["ADV-1"] == StoredObject(
            key="ADV-1", data=b"hello", compressed=False
        )

    async def test_level_zero_stores_uncompressed(self, storage, codec):
        usecase = New(config=Config(compression_level=0), storage=storage, codec=codec)

        result = await usecase.publish(PublishInput(data=b"hello", advisory="ADV-1"))

        assert result.compressed is False
        assert storage.objects["ADV-1"].data == b"hello"

    async def test_store_failure(self, usecase, storage, store_error):
        storage.put_error = store_error

        with pytest.raises(ErrStoreFailure, match="connection refused"):
            await usecase.publish(PublishInput(data=b"hello", advisory="ADV-1"))

    async def test_last_writer_wins(self, usecase, storage):
        await usecase.publish(PublishInput(data=b"first", advisory="ADV-1"))
        await usecase.publish(PublishInput(data=b"second", advisory="ADV-1"))

        assert len(storage.objects) == 1
        result = await usecase.lookup(LookupInput(advisory="ADV-1"))
        assert result.data == b"second"


class TestLookup:
    """Parameter handling and decompress-on-read."""

    async def test_missing_parameters(self, usecase, storage):
        with pytest.raises(ErrMissingParameter, match="Missing valid advisory or CVE"):
            await usecase.lookup(LookupInput())
        assert storage.get_calls == []

    async def test_cve_not_supported(self, usecase, storage):
        with pytest.raises(ErrUnsupportedQuery, match="CVE lookup is not yet supported"):
            await usecase.lookup(LookupInput(cve="CVE-2021-1"))
        assert storage.get_calls == []

    async def test_advisory_wins_over_cve(self, usecase):
        await usecase.publish(PublishInput(data=b"hello", advisory="ADV-1"))
        result = await usecase.lookup(LookupInput(advisory="ADV-1", cve="CVE-2021-1"))
        assert result.data == b"hello"

    async def test_unknown_identifier_is_not_found(self, usecase):
        with pytest.raises(ErrAdvisoryNotFound):
            await usecase.lookup(LookupInput(advisory="never-published"))

    async def test_roundtrip_compressed(self, usecase):
        document = csaf("RHSA-2023:1441")
        await usecase.publish(PublishInput(data=document))

        result = await usecase.lookup(LookupInput(advisory="RHSA-2023:1441"))

        assert result.data == document
        assert result.compressed is True

    async def test_uncompressed_object_returned_as_is(self, usecase, storage):
        storage.objects["ADV-2"] = StoredObject(key="ADV-2", data=b"plain", compressed=False)

        result = await usecase.lookup(LookupInput(advisory="ADV-2"))

        assert result.data == b"plain"
        assert result.compressed is False

    async def test_streamed_frame_without_content_size(self, usecase, storage):
        out = io.BytesIO()
        zstandard.ZstdCompressor().copy_stream(io.BytesIO(b"hello advisory"), out)
        storage.objects["ADV-S"] = StoredObject(
            key="ADV-S", data=out.getvalue(), compressed=True
        )

        result = await usecase.lookup(LookupInput(advisory="ADV-S"))

        assert result.data == b"hello advisory"
        assert result.compressed is True

    async def test_corrupt_object_is_decode_failure(self, usecase, storage):
        storage.objects["ADV-3"] = StoredObject(
            key="ADV-3", data=b"not a zstd frame", compressed=True
        )

        with pytest.raises(ErrDecodeFailure, match="Unable to decode object"):
            await usecase.lookup(LookupInput(advisory="ADV-3"))

    async def test_store_read_failure(self, usecase, storage):
        storage.get_error = MinioAdapterError("MinIO S3 error: AccessDenied")

        with pytest.raises(ErrStoreFailure):
            await usecase.lookup(LookupInput(advisory="ADV-1"))


class TestConcurrency:
    """Readers share the store, publishes exclude everyone."""

    @pytest.fixture
    def slow_storage(self, storage_factory):
        return storage_factory(delay=0.05)

    @pytest.fixture
    def slow_usecase(self, slow_storage, codec, logger):
        return New(config=Config(), storage=slow_storage, codec=codec, logger=logger)

    async def test_concurrent_lookups_return_identical_bytes(self, slow_usecase):
        document = csaf("RHSA-2023:1441")
        await slow_usecase.publish(PublishInput(data=document))

        results = await asyncio.gather(
            *(slow_usecase.lookup(LookupInput(advisory="RHSA-2023:1441")) for _ in range(20))
        )

        assert all(r.data == document for r in results)

    async def test_lookups_overlap(self, slow_usecase):
        await slow_usecase.publish(PublishInput(data=b"hello", advisory="ADV-1"))

        loop = asyncio.get_running_loop()
        start = loop.time()
        await asyncio.gather(
            *(slow_usecase.lookup(LookupInput(advisory="ADV-1")) for _ in range(10))
        )
        elapsed = loop.time() - start

        # Ten serialized reads would take at least 0.5s
        assert elapsed < 0.4

    async def test_publish_delays_lookups(self, slow_usecase):
        await slow_usecase.publish(PublishInput(data=b"old", advisory="ADV-1"))

        publish_task = asyncio.create_task(
            slow_usecase.publish(PublishInput(data=b"new", advisory="ADV-1"))
        )
        await asyncio.sleep(0.01)
        lookups = [
            asyncio.create_task(slow_usecase.lookup(LookupInput(advisory="ADV-1")))
            for _ in range(5)
        ]

        await publish_task
        results = await asyncio.gather(*lookups)

        assert all(r.data == b"new" for r in results)

    async def test_publishes_to_same_identifier_are_serialized(self, slow_usecase, slow_storage):
        await asyncio.gather(
            *(
                slow_usecase.publish(PublishInput(data=f"v{i}".encode(), advisory="ADV-1"))
                for i in range(5)
            )
        )

        assert len(slow_storage.put_calls) == 5
        last_key, last_data, _ = slow_storage.put_calls[-1]
        result = await slow_usecase.lookup(LookupInput(advisory="ADV-1"))
        assert slow_storage.objects[last_key].data == last_data
        assert result.data.startswith(b"v")

    async def test_cancelled_publish_holds_lock_until_put_finishes(
        self, slow_usecase, slow_storage
    ):
        publish_task = asyncio.create_task(
            slow_usecase.publish(PublishInput(data=b"hello", advisory="ADV-1"))
        )
        await asyncio.sleep(0.01)
        assert slow_usecase.lock.writer_active is True

        publish_task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await publish_task

        assert "ADV-1" in slow_storage.objects
        assert slow_usecase.lock.writer_active is False

    async def test_lookup_after_cancelled_publish_sees_write(self, slow_usecase):
        publish_task = asyncio.create_task(
            slow_usecase.publish(PublishInput(data=b"hello", advisory="ADV-1"))
        )
        await asyncio.sleep(0.01)
        lookup_task = asyncio.create_task(
            slow_usecase.lookup(LookupInput(advisory="ADV-1"))
        )
        await asyncio.sleep(0)
        publish_task.cancel()

        result = await lookup_task

        assert result.data == b"hello"
        assert publish_task.cancelled()
