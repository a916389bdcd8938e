from __future__ import annotations

import asyncio
import io
from typing import Dict, Optional

from minio import Minio  # type: ignore
from minio.error import S3Error  # type: ignore

from pkg.logger.logger import Logger
from .interface import IObjectStorage
from .type import MinIOConfig, StoredObject
from .constant import *


class MinioAdapterError(Exception):
    """Base exception for MinIO adapter operations."""

    pass


class MinioObjectNotFoundError(MinioAdapterError):
    """Raised when requested object does not exist."""

    pass


class MinioAdapter(IObjectStorage):
    """Thin async wrapper around the blocking MinIO client.

    SDK calls run in a worker thread so they never block the event loop.

    Attributes:
        config: MinIO configuration
    """

    def __init__(
        self,
        config: MinIOConfig,
        logger: Optional[Logger] = None,
        client: Optional[Minio] = None,
    ):
        """Initialize MinIO adapter with configuration.

        Args:
            config: MinIO configuration
            logger: Logger instance (optional)
            client: Preconfigured MinIO client (optional)
        """
        self.config = config
        self.logger = logger

        self._client = client or Minio(
            self.config.endpoint,
            access_key=self.config.access_key,
            secret_key=self.config.secret_key,
            secure=self.config.secure,
            region=self.config.region,
        )

    @staticmethod
    def _build_metadata(metadata: Dict[str, str], compressed: bool) -> Dict[str, str]:
        """Build upload metadata, user keys are sent with the x-amz-meta- prefix."""
        result = {}
        for key, value in metadata.items():
            key = key.lower()
            if not key.startswith(METADATA_PREFIX):
                key = METADATA_PREFIX + key
            result[key] = value

        result[METADATA_COMPRESSED] = (
            METADATA_COMPRESSED_TRUE if compressed else METADATA_COMPRESSED_FALSE
        )
        return result

    @staticmethod
    def _parse_metadata(headers: Dict[str, str]) -> tuple[bool, Dict[str, str]]:
        """Split object headers into the compressed flag and user metadata.

        MinIO may return metadata keys in any case.
        """
        meta_lower = {k.lower(): v for k, v in (headers or {}).items()}

        compressed_flag = meta_lower.pop(METADATA_COMPRESSED, "")
        compressed = compressed_flag.lower() == METADATA_COMPRESSED_TRUE

        metadata = {
            k[len(METADATA_PREFIX):]: v
            for k, v in meta_lower.items()
            if k.startswith(METADATA_PREFIX)
        }
        return compressed, metadata

    @staticmethod
    def _is_not_found(exc: S3Error) -> bool:
        return exc.code in S3_NOT_FOUND_CODES

    def _get_sync(self, key: str) -> StoredObject:
        response = None
        try:
            try:
                stat = self._client.stat_object(self.config.bucket, key)
            except S3Error as exc:
                if self._is_not_found(exc):
                    raise MinioObjectNotFoundError(
                        f"Object not found: {self.config.bucket}/{key}"
                    ) from exc
                raise

            compressed, metadata = self._parse_metadata(stat.metadata)

            response = self._client.get_object(self.config.bucket, key)
            data = response.read()

            return StoredObject(
                key=key, data=data, compressed=compressed, metadata=metadata
            )

        except MinioAdapterError:
            raise
        except S3Error as exc:
            if self._is_not_found(exc):
                raise MinioObjectNotFoundError(
                    f"Object not found: {self.config.bucket}/{key}"
                ) from exc
            raise MinioAdapterError(f"MinIO S3 error: {exc}") from exc
        except Exception as exc:
            raise MinioAdapterError(f"Failed to fetch from MinIO: {exc}") from exc
        finally:
            if response is not None:
                response.close()
                response.release_conn()

    def _put_sync(
        self, key: str, metadata: Dict[str, str], data: bytes, compressed: bool
    ) -> None:
        try:
            self._client.put_object(
                self.config.bucket,
                key,
                io.BytesIO(data),
                length=len(data),
                content_type=CONTENT_TYPE,
                metadata=self._build_metadata(metadata, compressed),
            )
        except S3Error as exc:
            raise MinioAdapterError(f"MinIO upload failed: {exc}") from exc
        except Exception as exc:
            raise MinioAdapterError(f"Upload failed: {exc}") from exc

    async def get(self, key: str) -> StoredObject:
        """Download an object and its compressed flag.

        Args:
            key: Object key within the configured bucket.

        Returns:
            StoredObject with the bytes exactly as stored.

        Raises:
            MinioObjectNotFoundError: If the object does not exist.
            MinioAdapterError: If the object cannot be fetched.
        """
        if not key:
            raise ValueError("key is required")

        if self.logger:
            self.logger.debug(
                f"pkg.minio: Downloading bucket={self.config.bucket}, key={key}"
            )
        return await asyncio.to_thread(self._get_sync, key)

    async def put(
        self,
        key: str,
        metadata: Dict[str, str],
        data: bytes,
        compressed: bool,
    ) -> None:
        """Upload an object, overwriting whatever is stored under key.

        Args:
            key: Object key within the configured bucket.
            metadata: User metadata.
            data: Bytes to persist as-is.
            compressed: Whether data is a zstd frame.

        Raises:
            MinioAdapterError: If upload fails.
        """
        if not key:
            raise ValueError("key is required")

        await asyncio.to_thread(self._put_sync, key, metadata, data, compressed)

        if self.logger:
            self.logger.debug(
                f"pkg.minio: Uploaded bucket={self.config.bucket}, key={key}, "
                f"size={len(data)}, compressed={compressed}"
            )

    async def ensure_bucket(self) -> None:
        """Create the configured bucket when it does not exist yet.

        Raises:
            MinioAdapterError: If the bucket cannot be checked or created.
        """

        def _ensure() -> bool:
            if self._client.bucket_exists(self.config.bucket):
                return False
            self._client.make_bucket(self.config.bucket)
            return True

        try:
            created = await asyncio.to_thread(_ensure)
        except S3Error as exc:
            raise MinioAdapterError(f"Failed to prepare bucket: {exc}") from exc

        if created and self.logger:
            self.logger.info(f"pkg.minio: Created bucket {self.config.bucket}")


__all__ = [
    "MinioAdapter",
    "MinioAdapterError",
    "MinioObjectNotFoundError",
]
