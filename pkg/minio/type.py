from dataclasses import dataclass, field
from typing import Dict, Optional
from .constant import *


@dataclass
class MinIOConfig:
    """MinIO client configuration.

    Attributes:
        endpoint: MinIO server endpoint (e.g., 'localhost:9000')
        access_key: Access key for authentication
        secret_key: Secret key for authentication
        bucket: Bucket holding one object per advisory
        secure: Whether to use HTTPS
        region: Optional region name
    """

    endpoint: str
    access_key: str
    secret_key: str
    bucket: str = DEFAULT_BUCKET
    secure: bool = False
    region: Optional[str] = None

    def __post_init__(self):
        """Validate configuration."""
        if not self.endpoint or not self.endpoint.strip():
            raise ValueError("endpoint cannot be empty")

        if not self.access_key or not self.access_key.strip():
            raise ValueError("access_key cannot be empty")

        if not self.secret_key or not self.secret_key.strip():
            raise ValueError("secret_key cannot be empty")

        if not self.bucket or not self.bucket.strip():
            raise ValueError("bucket cannot be empty")

        self.endpoint = (
            self.endpoint.replace("http://", "").replace("https://", "").strip()
        )


@dataclass
class StoredObject:
    """An object as held by the store.

    Attributes:
        key: Object key
        data: Bytes exactly as persisted
        compressed: Whether data is a zstd frame
        metadata: User metadata, without the x-amz-meta- prefix
    """

    key: str
    data: bytes
    compressed: bool
    metadata: Dict[str, str] = field(default_factory=dict)

    @property
    def size(self) -> int:
        return len(self.data)


__all__ = [
    "MinIOConfig",
    "StoredObject",
]
