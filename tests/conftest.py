"""Shared fixtures: an in-memory object store and a quiet logger."""

import asyncio
from typing import Dict, List, Optional, Tuple

import pytest

from pkg.logger.logger import Logger, LoggerConfig
from pkg.minio.minio import MinioAdapterError, MinioObjectNotFoundError
from pkg.minio.type import StoredObject
from pkg.rwlock.rwlock import RWLock
from pkg.zstd.zstd import Zstd
from internal.vex.type import Config
from internal.vex.usecase.new import New


class FakeObjectStorage:
    """In-memory stand-in for MinioAdapter that records every call."""

    def __init__(self, delay: float = 0.0):
        self.objects: Dict[str, StoredObject] = {}
        self.get_calls: List[str] = []
        self.put_calls: List[Tuple[str, bytes, bool]] = []
        self.delay = delay
        self.put_error: Optional[Exception] = None
        self.get_error: Optional[Exception] = None

    async def get(self, key: str) -> StoredObject:
        self.get_calls.append(key)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.get_error is not None:
            raise self.get_error
        if key not in self.objects:
            raise MinioObjectNotFoundError(f"Object not found: {key}")
        return self.objects[key]

    async def put(
        self, key: str, metadata: Dict[str, str], data: bytes, compressed: bool
    ) -> None:
        self.put_calls.append((key, data, compressed))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.put_error is not None:
            raise self.put_error
        self.objects[key] = StoredObject(
            key=key, data=bytes(data), compressed=compressed, metadata=dict(metadata)
        )


@pytest.fixture
def logger():
    return Logger(LoggerConfig(level="DEBUG", enable_console=False))


@pytest.fixture
def storage():
    return FakeObjectStorage()


@pytest.fixture
def codec():
    return Zstd()


@pytest.fixture
def usecase(storage, codec, logger):
    return New(config=Config(), storage=storage, codec=codec, lock=RWLock(), logger=logger)


@pytest.fixture
def store_error():
    return MinioAdapterError("MinIO upload failed: connection refused")


@pytest.fixture
def storage_factory():
    return FakeObjectStorage
