import asyncio
from typing import Optional

from pkg.logger.logger import Logger
from pkg.minio.interface import IObjectStorage
from pkg.minio.minio import MinioAdapterError
from pkg.rwlock.interface import IRWLock
from pkg.zstd.interface import IZstd
from internal.vex.type import Config, PublishInput, PublishOutput
from internal.vex.errors import ErrStoreFailure
from internal.vex.constant import MSG_STORE_FAILED
from .helpers import compress_payload, derive_identifier


async def publish(
    input_data: PublishInput,
    config: Config,
    storage: IObjectStorage,
    lock: IRWLock,
    codec: IZstd,
    logger: Optional[Logger] = None,
) -> PublishOutput:
    key = derive_identifier(input_data, logger)

    # Compress before taking the lock, only the put is serialized
    data, compressed = compress_payload(
        codec, input_data.data, config.compression_level, logger
    )

    if logger:
        logger.debug(
            f"internal.vex.usecase.publish: Storing new VEX with id: {key}, "
            f"compressed: {compressed}, size: {len(input_data.data)} -> {len(data)}"
        )

    try:
        async with lock.write():
            put_task = asyncio.ensure_future(storage.put(key, {}, data, compressed))
            try:
                await asyncio.shield(put_task)
            except asyncio.CancelledError:
                # The upload thread cannot be stopped, keep the lock until it settles
                await asyncio.wait([put_task])
                error = None if put_task.cancelled() else put_task.exception()
                if logger and error is not None:
                    logger.error(
                        f"internal.vex.usecase.publish: Store write failed for {key} "
                        f"after cancellation: {error}"
                    )
                raise
    except MinioAdapterError as e:
        if logger:
            logger.error(f"internal.vex.usecase.publish: Store write failed for {key}: {e}")
        raise ErrStoreFailure(MSG_STORE_FAILED.format(error=e)) from e

    if logger:
        logger.info(f"internal.vex.usecase.publish: Stored VEX {key} ({len(data)} bytes)")

    return PublishOutput(identifier=key, size=len(data), compressed=compressed)
