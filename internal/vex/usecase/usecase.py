from typing import Optional

from pkg.logger.logger import Logger
from pkg.minio.interface import IObjectStorage
from pkg.rwlock.interface import IRWLock
from pkg.zstd.interface import IZstd
from internal.vex.interface import IVexUseCase
from internal.vex.type import (
    Config,
    LookupInput,
    LookupOutput,
    PublishInput,
    PublishOutput,
)
from .lookup import lookup as _lookup
from .publish import publish as _publish


class VexUseCase(IVexUseCase):
    """Advisory gateway in front of a single shared object store.

    All store access goes through the reader/writer lock: lookups share it,
    publishes hold it exclusively for the duration of the put.
    """

    def __init__(
        self,
        config: Config,
        storage: IObjectStorage,
        codec: IZstd,
        lock: IRWLock,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.storage = storage
        self.codec = codec
        self.lock = lock
        self.logger = logger

    async def lookup(self, input_data: LookupInput) -> LookupOutput:
        return await _lookup(
            input_data=input_data,
            storage=self.storage,
            lock=self.lock,
            codec=self.codec,
            logger=self.logger,
        )

    async def publish(self, input_data: PublishInput) -> PublishOutput:
        return await _publish(
            input_data=input_data,
            config=self.config,
            storage=self.storage,
            lock=self.lock,
            codec=self.codec,
            logger=self.logger,
        )
