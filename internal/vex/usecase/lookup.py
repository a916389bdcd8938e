from typing import Optional

from pkg.logger.logger import Logger
from pkg.minio.interface import IObjectStorage
from pkg.minio.minio import MinioObjectNotFoundError, MinioAdapterError
from pkg.rwlock.interface import IRWLock
from pkg.zstd.interface import IZstd
from internal.vex.type import LookupInput, LookupOutput
from internal.vex.errors import (
    ErrAdvisoryNotFound,
    ErrMissingParameter,
    ErrStoreFailure,
    ErrUnsupportedQuery,
)
from internal.vex.constant import (
    MSG_CVE_UNSUPPORTED,
    MSG_FETCH_FAILED,
    MSG_MISSING_PARAMETER,
    MSG_NOT_FOUND,
)
from .helpers import decompress_payload


async def lookup(
    input_data: LookupInput,
    storage: IObjectStorage,
    lock: IRWLock,
    codec: IZstd,
    logger: Optional[Logger] = None,
) -> LookupOutput:
    if input_data.advisory:
        key = input_data.advisory
    elif input_data.cve:
        raise ErrUnsupportedQuery(MSG_CVE_UNSUPPORTED)
    else:
        raise ErrMissingParameter(MSG_MISSING_PARAMETER)

    if logger:
        logger.debug(f"internal.vex.usecase.lookup: Querying VEX using advisory {key}")

    try:
        async with lock.read():
            obj = await storage.get(key)
    except MinioObjectNotFoundError as e:
        if logger:
            logger.warning(
                f"internal.vex.usecase.lookup: Unable to locate object with key {key}: {e}"
            )
        raise ErrAdvisoryNotFound(MSG_NOT_FOUND) from e
    except MinioAdapterError as e:
        if logger:
            logger.error(f"internal.vex.usecase.lookup: Store read failed for {key}: {e}")
        raise ErrStoreFailure(MSG_FETCH_FAILED.format(error=e)) from e

    if logger:
        logger.debug(
            f"internal.vex.usecase.lookup: Retrieved object compressed: {obj.compressed}"
        )

    # Decompress outside the lock
    data = obj.data
    if obj.compressed:
        data = decompress_payload(codec, key, obj.data, logger)

    return LookupOutput(identifier=key, data=data, compressed=obj.compressed)
