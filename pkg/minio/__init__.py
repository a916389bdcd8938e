from .type import MinIOConfig, StoredObject
from .interface import IObjectStorage
from .minio import MinioAdapter, MinioAdapterError, MinioObjectNotFoundError

__all__ = [
    # Interfaces
    "IObjectStorage",
    # Implementations
    "MinioAdapter",
    # Types
    "MinIOConfig",
    "StoredObject",
    # Errors
    "MinioAdapterError",
    "MinioObjectNotFoundError",
]
