from typing import Optional

from pkg.logger.logger import Logger
from pkg.minio.interface import IObjectStorage
from pkg.rwlock.interface import IRWLock
from pkg.rwlock.rwlock import RWLock
from pkg.zstd.interface import IZstd
from internal.vex.type import Config
from .usecase import VexUseCase


def New(
    config: Config,
    storage: IObjectStorage,
    codec: IZstd,
    lock: Optional[IRWLock] = None,
    logger: Optional[Logger] = None,
) -> VexUseCase:
    """Create new VexUseCase instance.

    Args:
        config: Gateway configuration
        storage: Object store shared by every request
        codec: Compression codec
        lock: Reader/writer lock guarding storage (a new RWLock by default)
        logger: Logger instance (optional)

    Returns:
        VexUseCase instance

    Raises:
        ValueError: If config, storage or codec is invalid
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    if not isinstance(storage, IObjectStorage):
        raise ValueError("storage must implement IObjectStorage")

    if not isinstance(codec, IZstd):
        raise ValueError("codec must implement IZstd")

    return VexUseCase(config, storage, codec, lock or RWLock(), logger)


__all__ = ["New"]
